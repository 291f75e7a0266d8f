"""Options parsed from a suggestion fragment."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Sequence

from bs4 import BeautifulSoup, Tag

DEFAULT_PREFIX = "autocomplete"


@dataclass(frozen=True)
class Option:
    """One selectable suggestion."""

    id: str
    label: str
    value: str
    disabled: bool = False
    href: str | None = None
    is_link: bool = False


class OptionIds:
    """Generates option ids for one autocomplete instance.

    ``"results-option-0"``, ``"results-option-1"``, ...
    """

    def __init__(self, start: int = 0) -> None:
        self._next = start

    def next(self, prefix: str | None = None) -> str:
        n = self._next
        self._next += 1
        return f"{prefix or DEFAULT_PREFIX}-option-{n}"


class ResultSet(Sequence[Option]):
    """Ordered, immutable collection of options in document order."""

    def __init__(self, options: Sequence[Option] = ()) -> None:
        self._options = tuple(options)
        ids = [o.id for o in self._options]
        if len(set(ids)) != len(ids):
            raise ValueError("option ids must be unique within a result set")

    def __getitem__(self, index):
        return self._options[index]

    def __len__(self) -> int:
        return len(self._options)

    def __iter__(self) -> Iterator[Option]:
        return iter(self._options)

    def __repr__(self) -> str:
        return f"ResultSet({[o.id for o in self._options]!r})"

    @property
    def navigable(self) -> list[Option]:
        """Options that can be selected and committed."""
        return [o for o in self._options if not o.disabled]

    def get(self, option_id: str) -> Option | None:
        for option in self._options:
            if option.id == option_id:
                return option
        return None

    def index(self, option: Option, *args) -> int:
        return self._options.index(option, *args)


EMPTY = ResultSet()


def _is_disabled(el: Tag) -> bool:
    value = el.get("aria-disabled")
    return value is not None and value != "false"


def _parse_option(el: Tag, ids: OptionIds, prefix: str | None, seen: set[str], reserved: set[str]) -> Option:
    option_id = el.get("id")
    if not option_id or option_id in seen:
        option_id = ids.next(prefix)
        while option_id in seen or option_id in reserved:
            option_id = ids.next(prefix)
    label = el.get("data-autocomplete-label") or el.get_text().strip()
    value = el.get("data-autocomplete-value") or label
    is_link = el.name == "a"
    return Option(
        id=option_id,
        label=label,
        value=value,
        disabled=_is_disabled(el),
        href=el.get("href") if is_link else None,
        is_link=is_link,
    )


def build_result_set(markup: str, ids: OptionIds, prefix: str | None = None) -> ResultSet:
    """Parse every ``role="option"`` element of *markup* into a ResultSet.

    Elements without an ``id`` get one from *ids*, prefixed with the results
    container's id (*prefix*). Generated ids skip any id the markup already
    uses.
    """
    soup = BeautifulSoup(markup or "", "html.parser")
    elements = soup.find_all(attrs={"role": "option"})
    reserved = {el.get("id") for el in elements if el.get("id")}
    options: list[Option] = []
    seen: set[str] = set()
    for el in elements:
        option = _parse_option(el, ids, prefix, seen, reserved)
        seen.add(option.id)
        options.append(option)
    return ResultSet(options)
