import logging
from typing import Dict, Iterable, Iterator, List, Mapping, Optional

from member_directory_filters.constants.app_constants import AppConstants
from member_directory_filters.constants.app_message import AppMessage
from member_directory_filters.model.member_model import FilterField

logger = logging.getLogger(__name__)


class DuplicateFieldError(ValueError):
    pass


class FilterRegistry:
    """
    Ordered, read-only-after-startup mapping of request parameter -> profile attribute.

    Declaration order is the order fields are compiled and rendered in.
    """

    def __init__(self, fields: Optional[Iterable[FilterField]] = None):
        self._fields: Dict[str, FilterField] = {}
        for field in fields or []:
            self._register(field)

    def _register(self, field: FilterField) -> FilterField:
        if field.param_name in self._fields:
            raise DuplicateFieldError(f"{AppMessage.DUPLICATE_FIELD}: '{field.param_name}'")
        self._fields[field.param_name] = field
        logger.debug(f"Registered filter field {field.param_name} -> {field.attribute_key}")
        return field

    def add_field(self, param_name: str, attribute_key: str, label: Optional[str] = None,
                  placeholder: str = "") -> FilterField:
        """
        Register a filterable attribute.

        :raises DuplicateFieldError: if param_name is already registered
        """
        return self._register(FilterField(param_name=param_name, attribute_key=attribute_key,
                                          label=label, placeholder=placeholder))

    def get(self, param_name: str) -> Optional[FilterField]:
        return self._fields.get(param_name)

    def fields(self) -> List[FilterField]:
        return list(self._fields.values())

    def param_names(self) -> List[str]:
        return list(self._fields.keys())

    def __iter__(self) -> Iterator[FilterField]:
        return iter(list(self._fields.values()))

    def __contains__(self, param_name: object) -> bool:
        return param_name in self._fields

    def __len__(self) -> int:
        return len(self._fields)

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, str]) -> 'FilterRegistry':
        registry = cls()
        for param_name, attribute_key in mapping.items():
            registry.add_field(param_name, attribute_key)
        return registry


def default_registry() -> FilterRegistry:
    """Skills, Location and Interests, the stock directory filters."""
    registry = FilterRegistry()
    registry.add_field(AppConstants.SKILLS, 'Skills', placeholder='e.g. JavaScript, Design')
    registry.add_field(AppConstants.LOCATION, 'Location', placeholder='City, Country')
    registry.add_field(AppConstants.INTERESTS, 'Interests', placeholder='e.g. Hiking, Startups')
    return registry
