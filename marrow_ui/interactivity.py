"""State models for Marrow UI's interactive components.

Each interactive component in ``marrow.js`` registers an Alpine.js data
factory such as ``mwTabs`` or ``mwPagination``. This module mirrors those
factories as plain dataclasses so the state transitions can be created per
element, inspected, and tested without a browser. :data:`COMPONENT_FACTORIES`
maps the Alpine name used in ``x-data`` to the constructor.

Examples
--------
>>> pager = create_component("mwPagination", 10, 5)
>>> pager.pages
[3, 4, 5, 6, 7]
>>> pager.go_to(11)
>>> pager.current
5
>>> data_components_in('<div x-data="mwTabs(\\'a\\')"></div>')
['mwTabs']
"""

from __future__ import annotations

import calendar
import dataclasses as dc
import datetime as dt
import itertools
import re
import typing as typ

X_DATA_PATTERN = re.compile(r"""x-data=["']\s*(\w+)\s*\(""")
HOVER_OPEN_DELAY_MS = 200
HOVER_CLOSE_DELAY_MS = 100
DEFAULT_TOAST_DURATION_MS = 4000


class UnknownComponentError(KeyError):
    """Raised when no interactive component is registered under a name."""

    def __str__(self) -> str:
        """Return the message without the quoting KeyError adds."""
        return str(self.args[0]) if self.args else ""


@dc.dataclass(slots=True)
class Accordion:
    """Accordion allowing at most one open item."""

    active_item: str | None = None

    def toggle(self, item_id: str) -> None:
        self.active_item = None if self.active_item == item_id else item_id

    def is_open(self, item_id: str) -> bool:
        return self.active_item == item_id


@dc.dataclass(slots=True)
class AccordionMulti:
    """Accordion where any number of items may be open."""

    open_items: list[str] = dc.field(default_factory=list)

    def toggle(self, item_id: str) -> None:
        if item_id in self.open_items:
            self.open_items.remove(item_id)
        else:
            self.open_items.append(item_id)

    def is_open(self, item_id: str) -> bool:
        return item_id in self.open_items


@dc.dataclass(slots=True)
class Tabs:
    """Tab strip tracking the active tab value."""

    active: str = ""

    def set_active(self, tab: str) -> None:
        self.active = tab

    def is_active(self, tab: str) -> bool:
        return self.active == tab


@dc.dataclass(slots=True)
class Disclosure:
    """Open/closed state shared by dialogs, sheets, menus, and popovers."""

    open: bool = False

    def show(self) -> None:
        self.open = True

    def close(self) -> None:
        self.open = False

    def toggle(self) -> None:
        self.open = not self.open


@dc.dataclass(slots=True)
class AlertDialog(Disclosure):
    """Dialog that records which action closed it.

    ``last_action`` takes the place of the ``confirm``/``cancel`` DOM events
    the browser version dispatches.
    """

    last_action: str | None = None

    def confirm(self) -> None:
        self.last_action = "confirm"
        self.close()

    def cancel(self) -> None:
        self.last_action = "cancel"
        self.close()


@dc.dataclass(slots=True)
class ContextMenu(Disclosure):
    """Menu opened at pointer coordinates."""

    x: int = 0
    y: int = 0

    def show_at(self, x: int, y: int) -> None:
        self.x = x
        self.y = y
        self.show()


@dc.dataclass(slots=True)
class Toggle:
    """Boolean control used by switches, checkboxes, and toggle buttons."""

    checked: bool = False

    def toggle(self) -> None:
        self.checked = not self.checked


@dc.dataclass(slots=True)
class RadioGroup:
    """Single selection among radio values."""

    selected: str = ""

    def select(self, value: str) -> None:
        self.selected = value

    def is_selected(self, value: str) -> bool:
        return self.selected == value


@dc.dataclass(slots=True)
class Hover:
    """Visibility of tooltips and hover cards.

    ``open_delay_ms`` and ``close_delay_ms`` describe the browser timers; the
    model itself switches state immediately.
    """

    show: bool = False
    open_delay_ms: int = 0
    close_delay_ms: int = 0

    def enter(self) -> None:
        self.show = True

    def leave(self) -> None:
        self.show = False


@dc.dataclass(slots=True)
class Command(Disclosure):
    """Command palette with a search filter that resets when toggled."""

    search: str = ""

    def show(self) -> None:
        self.open = True
        self.search = ""

    def close(self) -> None:
        self.open = False
        self.search = ""

    def matches_search(self, text: str) -> bool:
        if not self.search:
            return True
        return self.search.lower() in text.lower()


@dc.dataclass(slots=True)
class Slider:
    """Range input bounded by ``minimum`` and ``maximum``."""

    minimum: float = 0
    maximum: float = 100
    value: float = 50

    @property
    def percentage(self) -> float:
        """Return the value's position in the range; 0 for an empty range."""
        span = self.maximum - self.minimum
        if not span:
            return 0.0
        return (self.value - self.minimum) / span * 100

    def set_value(self, value: float | str) -> None:
        self.value = float(value)


@dc.dataclass(slots=True)
class Pagination:
    """Page cursor with a five-page window around the current page."""

    total_pages: int = 10
    current: int = 1

    def go_to(self, page: int) -> None:
        if 1 <= page <= self.total_pages:
            self.current = page

    def next(self) -> None:
        self.go_to(self.current + 1)

    def prev(self) -> None:
        self.go_to(self.current - 1)

    @property
    def pages(self) -> list[int]:
        start = max(1, self.current - 2)
        end = min(self.total_pages, self.current + 2)
        return list(range(start, end + 1))


@dc.dataclass(slots=True)
class ToggleGroup:
    """Group of toggle buttons in ``single`` or ``multiple`` mode."""

    type: str = "single"
    value: str | list[str] = ""

    def __post_init__(self) -> None:
        if self.type == "multiple":
            self.value = list(self.value or [])
        else:
            self.value = self.value or ""

    def select(self, item: str) -> None:
        if self.type == "single":
            self.value = "" if self.value == item else item
            return
        values = typ.cast("list[str]", self.value)
        if item in values:
            values.remove(item)
        else:
            values.append(item)

    def is_selected(self, item: str) -> bool:
        if self.type == "single":
            return self.value == item
        return item in self.value


@dc.dataclass(slots=True)
class Combobox(Disclosure):
    """Searchable select over ``{"label": ..., "value": ...}`` items."""

    items: list[dict[str, str]] = dc.field(default_factory=list)
    search: str = ""
    selected: dict[str, str] | None = None

    @property
    def filtered(self) -> list[dict[str, str]]:
        if not self.search:
            return self.items
        needle = self.search.lower()
        return [item for item in self.items if needle in item["label"].lower()]

    def select(self, item: dict[str, str]) -> None:
        self.selected = item
        self.search = item["label"]
        self.open = False


@dc.dataclass(slots=True)
class Carousel:
    """Slide index that wraps at both ends; stays at 0 without slides."""

    count: int = 3
    current: int = 0

    def next(self) -> None:
        if self.count:
            self.current = (self.current + 1) % self.count

    def prev(self) -> None:
        if self.count:
            self.current = (self.current - 1 + self.count) % self.count

    def go_to(self, index: int) -> None:
        self.current = index


@dc.dataclass(slots=True)
class Resizable:
    """Two-panel split expressed as the first panel's width percentage."""

    split: float = 50
    dragging: bool = False

    def start_drag(self) -> None:
        self.dragging = True

    def drag_to(self, x: float, width: float) -> None:
        self.split = max(10.0, min(90.0, x / width * 100))

    def end_drag(self) -> None:
        self.dragging = False


@dc.dataclass(slots=True)
class InputOTP:
    """One-time-code input split into single-character cells."""

    length: int = 6
    values: list[str] = dc.field(default_factory=list)

    def __post_init__(self) -> None:
        if not self.values:
            self.values = [""] * self.length

    @property
    def code(self) -> str:
        return "".join(self.values)

    def handle_input(self, index: int, text: str) -> int | None:
        """Store the last typed character; return the cell to focus next."""
        self.values[index] = text[-1:]
        if self.values[index] and index < self.length - 1:
            return index + 1
        return None

    def handle_backspace(self, index: int) -> int | None:
        """Return the previous cell to focus when backspacing an empty cell."""
        if not self.values[index] and index > 0:
            return index - 1
        return None


@dc.dataclass(slots=True)
class Progress:
    """Progress bar value clamped to 0-100."""

    value: float = 0

    def set(self, value: float) -> None:
        self.value = max(0, min(100, value))


@dc.dataclass(slots=True)
class Calendar:
    """Month grid with a selected date; months are 1-based."""

    year: int = dc.field(default_factory=lambda: dt.date.today().year)
    month: int = dc.field(default_factory=lambda: dt.date.today().month)
    selected: dt.date | None = None

    @property
    def month_name(self) -> str:
        return calendar.month_name[self.month]

    @property
    def days_in_month(self) -> int:
        return calendar.monthrange(self.year, self.month)[1]

    @property
    def first_day_of_week(self) -> int:
        """Return the weekday of the 1st with Sunday as 0."""
        return (calendar.monthrange(self.year, self.month)[0] + 1) % 7

    @property
    def days(self) -> list[int | None]:
        padding: list[int | None] = [None] * self.first_day_of_week
        return padding + list(range(1, self.days_in_month + 1))

    def select_date(self, day: int | None) -> None:
        if not day:
            return
        self.selected = dt.date(self.year, self.month, day)

    def is_selected(self, day: int | None) -> bool:
        if not self.selected or not day:
            return False
        return self.selected == dt.date(self.year, self.month, day)

    def is_today(self, day: int | None, *, today: dt.date | None = None) -> bool:
        if not day:
            return False
        return (today or dt.date.today()) == dt.date(self.year, self.month, day)

    def prev_month(self) -> None:
        if self.month == 1:
            self.month = 12
            self.year -= 1
        else:
            self.month -= 1

    def next_month(self) -> None:
        if self.month == 12:
            self.month = 1
            self.year += 1
        else:
            self.month += 1


@dc.dataclass(slots=True)
class DatePicker(Calendar):
    """Calendar in a popover that closes once a date is picked."""

    open: bool = False

    @property
    def formatted(self) -> str:
        if not self.selected:
            return "Pick a date"
        return self.selected.isoformat()

    def select_date(self, day: int | None) -> None:
        if not day:
            return
        self.selected = dt.date(self.year, self.month, day)
        self.open = False

    def toggle(self) -> None:
        self.open = not self.open


@dc.dataclass(slots=True)
class Toast:
    """A single notification held by :class:`ToastStore`."""

    id: int
    title: str
    description: str = ""
    variant: str = "default"
    duration: int = DEFAULT_TOAST_DURATION_MS


@dc.dataclass(slots=True)
class ToastStore:
    """Shared queue of toasts; ``duration`` 0 means the toast stays."""

    items: list[Toast] = dc.field(default_factory=list)
    _ids: typ.Iterator[int] = dc.field(
        default_factory=lambda: itertools.count(1), repr=False
    )

    def add(
        self,
        title: str,
        description: str = "",
        *,
        variant: str = "default",
        duration: int = DEFAULT_TOAST_DURATION_MS,
    ) -> Toast:
        toast = Toast(next(self._ids), title, description, variant, duration)
        self.items.append(toast)
        return toast

    def remove(self, toast_id: int) -> None:
        self.items = [toast for toast in self.items if toast.id != toast_id]


def _hover_card() -> Hover:
    return Hover(open_delay_ms=HOVER_OPEN_DELAY_MS, close_delay_ms=HOVER_CLOSE_DELAY_MS)


def _toggle_group(type_: str = "single", initial: str | list[str] | None = None) -> ToggleGroup:
    return ToggleGroup(type=type_, value=initial or "")


def _sidebar(default_open: bool = True) -> Disclosure:
    return Disclosure(open=default_open)


COMPONENT_FACTORIES: dict[str, typ.Callable[..., object]] = {
    "mwAccordion": Accordion,
    "mwAccordionMulti": AccordionMulti,
    "mwTabs": Tabs,
    "mwDialog": Disclosure,
    "mwSheet": Disclosure,
    "mwDropdown": Disclosure,
    "mwPopover": Disclosure,
    "mwCollapsible": Disclosure,
    "mwSidebar": _sidebar,
    "mwAlertDialog": AlertDialog,
    "mwContextMenu": ContextMenu,
    "mwSwitch": Toggle,
    "mwCheckbox": Toggle,
    "mwToggle": Toggle,
    "mwRadioGroup": RadioGroup,
    "mwTooltip": Hover,
    "mwHoverCard": _hover_card,
    "mwCommand": Command,
    "mwSlider": Slider,
    "mwPagination": Pagination,
    "mwToggleGroup": _toggle_group,
    "mwCombobox": lambda items=None: Combobox(items=list(items or [])),
    "mwCarousel": Carousel,
    "mwResizable": Resizable,
    "mwInputOTP": InputOTP,
    "mwProgress": Progress,
    "mwDatePicker": DatePicker,
    "mwCalendar": Calendar,
}


def create_component(kind: str, *args: typ.Any, **kwargs: typ.Any) -> object:
    """Instantiate fresh state for one element using the ``kind`` factory.

    Positional arguments follow the Alpine call signature, for example
    ``create_component("mwSlider", 0, 10, 5)``.
    """
    try:
        factory = COMPONENT_FACTORIES[kind]
    except KeyError as exc:
        available = ", ".join(sorted(COMPONENT_FACTORIES))
        msg = f"Unknown component '{kind}'. Known components: {available}"
        raise UnknownComponentError(msg) from exc
    return factory(*args, **kwargs)


def data_components_in(html: str) -> list[str]:
    """Return registered component kinds referenced by ``x-data`` in ``html``.

    Kinds are listed once each, in order of first appearance.
    """
    found: list[str] = []
    for match in X_DATA_PATTERN.finditer(html):
        kind = match.group(1)
        if kind in COMPONENT_FACTORIES and kind not in found:
            found.append(kind)
    return found


__all__ = [
    "COMPONENT_FACTORIES",
    "Accordion",
    "AccordionMulti",
    "AlertDialog",
    "Calendar",
    "Carousel",
    "Combobox",
    "Command",
    "ContextMenu",
    "DatePicker",
    "Disclosure",
    "Hover",
    "InputOTP",
    "Pagination",
    "Progress",
    "RadioGroup",
    "Resizable",
    "Slider",
    "Tabs",
    "Toast",
    "ToastStore",
    "Toggle",
    "ToggleGroup",
    "UnknownComponentError",
    "create_component",
    "data_components_in",
]
