from dataclasses import dataclass
from typing import Final

from pd.core.flatpak_search_parser import parse_flatpak_search
from pd.core.package_types import PackageRecord
from pd.core.repo_search_parser import parse_repo_search
from pd.infra.process import decode_output, run_process


@dataclass(frozen=True)
class PackageSource:
    """A package search backed by an external command.

    The search term is appended to `args` as a single argument, so it is never
    interpreted by a shell.

    Attributes:
        name: Short label used in logs.
        program: Executable to run (looked up on PATH).
        args: Arguments placed before the search term.
    """

    name: str
    program: str
    args: tuple[str, ...] = ()

    def argv(self, term: str) -> list[str]:
        return [self.program, *self.args, term]

    def parse(self, text: str, term: str) -> list[PackageRecord]:
        """Parses two-line `repo/name version` + description output."""
        return parse_repo_search(text)

    def search(self, term: str) -> list[PackageRecord]:
        """Runs the search command and parses its output.

        Raises:
            AdapterError: The command could not be run or read.
        """
        output = run_process(self.argv(term))
        return self.parse(decode_output(output), term)


@dataclass(frozen=True)
class FlatpakSource(PackageSource):
    def parse(self, text: str, term: str) -> list[PackageRecord]:
        return parse_flatpak_search(text, term)


SYSTEM_REPO: Final[PackageSource] = PackageSource(
    name="pacman", program="pacman", args=("-Ss",)
)
USER_REPO: Final[PackageSource] = PackageSource(
    name="aur", program="yay", args=("-Ss", "--aur")
)
SANDBOXED: Final[PackageSource] = FlatpakSource(
    name="flatpak", program="flatpak", args=("search",)
)
