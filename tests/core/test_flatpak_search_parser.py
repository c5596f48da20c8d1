from pd.core.flatpak_search_parser import parse_flatpak_search
from pd.core.package_types import NO_DESCRIPTION, PackageRecord

HEADER = "Name\tDescription\tApplication ID\tVersion\tBranch\tRemotes\n"


def test_parse_flatpak_search_drops_header_line() -> None:
    text = HEADER + "org.x.Foo\tstable\tFoo app\n"

    assert parse_flatpak_search(text, "foo") == [
        PackageRecord(name="org.x.Foo", description="Foo app")
    ]


def test_parse_flatpak_search_filters_names_not_containing_term() -> None:
    text = HEADER + "org.x.Foo\tstable\tFoo app\n"

    assert parse_flatpak_search(text, "bar") == []


def test_parse_flatpak_search_matches_case_insensitively() -> None:
    text = HEADER + "org.example.GammaViewer\tstable\tViewer\n"

    assert parse_flatpak_search(text, "GAMMA") == [
        PackageRecord(name="org.example.GammaViewer", description="Viewer")
    ]


def test_parse_flatpak_search_keeps_extra_tabs_in_description() -> None:
    text = HEADER + "org.x.Foo\tstable\tFoo app\t1.0\tstable\tflathub\n"

    results = parse_flatpak_search(text, "foo")

    assert results == [
        PackageRecord(name="org.x.Foo", description="Foo app\t1.0\tstable\tflathub")
    ]


def test_parse_flatpak_search_uses_placeholder_for_missing_description() -> None:
    text = HEADER + "org.x.Foo\tstable\norg.x.FooToo\tstable\t   \n"

    assert parse_flatpak_search(text, "foo") == [
        PackageRecord(name="org.x.Foo", description=NO_DESCRIPTION),
        PackageRecord(name="org.x.FooToo", description=NO_DESCRIPTION),
    ]


def test_parse_flatpak_search_skips_single_field_and_empty_lines() -> None:
    text = HEADER + "\norg.x.FooOnly\n\norg.x.Foo\tstable\tFoo app\n"

    assert parse_flatpak_search(text, "foo") == [
        PackageRecord(name="org.x.Foo", description="Foo app")
    ]


def test_parse_flatpak_search_returns_empty_list_for_header_only() -> None:
    assert parse_flatpak_search(HEADER, "foo") == []


def test_parse_flatpak_search_splits_on_newlines_only() -> None:
    text = "Name\tDescription\norg.x.Foo\tstable\tFoo\x0capp more\norg.x.FooToo\tstable\tToo\n"

    assert parse_flatpak_search(text, "foo") == [
        PackageRecord(name="org.x.Foo", description="Foo\x0capp more"),
        PackageRecord(name="org.x.FooToo", description="Too"),
    ]
