"""Textual UI for typeahead."""

from typeahead.ui.app import TypeaheadApp
from typeahead.ui.widget import Autocomplete, QueryInput, ResultsList

__all__ = [
    "Autocomplete",
    "QueryInput",
    "ResultsList",
    "TypeaheadApp",
]
