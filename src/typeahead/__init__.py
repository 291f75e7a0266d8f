"""Remote type-ahead suggestions for text inputs."""

from typeahead.config import AutocompleteConfig, load_config
from typeahead.controller import AutocompleteController, Field
from typeahead.dispatch import InteractionDispatcher, Key, KeyResult
from typeahead.errors import ConfigError, FetchError, TypeaheadError
from typeahead.events import ChangeDetail, Emitter, ErrorDetail, ToggleDetail
from typeahead.fetch import ResultFetcher
from typeahead.options import Option, OptionIds, ResultSet, build_result_set

__all__ = [
    "AutocompleteConfig",
    "AutocompleteController",
    "ChangeDetail",
    "ConfigError",
    "Emitter",
    "ErrorDetail",
    "FetchError",
    "Field",
    "InteractionDispatcher",
    "Key",
    "KeyResult",
    "Option",
    "OptionIds",
    "ResultFetcher",
    "ResultSet",
    "ToggleDetail",
    "TypeaheadError",
    "build_result_set",
    "load_config",
]
