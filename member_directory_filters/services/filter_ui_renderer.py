import html
import logging
from typing import Iterable, List, Optional
from urllib.parse import unquote_plus, urlsplit, urlunsplit

from pydantic import BaseModel

from member_directory_filters.constants.app_constants import AppConstants
from member_directory_filters.constants.app_message import AppMessage
from member_directory_filters.registry.filter_registry import FilterRegistry
from member_directory_filters.utils.input_normalizer import normalize
from member_directory_filters.utils.request_params import RequestParams

logger = logging.getLogger(__name__)


class RenderContext(BaseModel):
    """Per-request render state. Create one per page render, never share it."""
    rendered: bool = False

    def claim(self) -> bool:
        """Mark the filters as rendered; False if they already were."""
        if self.rendered:
            return False
        self.rendered = True
        return True


def _segment_param(segment: str) -> str:
    key = unquote_plus(segment.partition('=')[0])
    return key.partition('[')[0]


def build_reset_url(current_url: str, param_names: Iterable[str]) -> str:
    """
    Drop every form of the given params (``name``, ``name[]``, ``name[0]``)
    from the URL. Other segments are kept byte for byte.
    """
    removed = set(param_names)
    parts = urlsplit(current_url or "")
    kept = [segment for segment in parts.query.split('&')
            if segment and _segment_param(segment) not in removed]
    return urlunsplit((parts.scheme, parts.netloc, parts.path, '&'.join(kept), parts.fragment))


def current_value(request_params: Optional[RequestParams], param_name: str) -> str:
    """Sanitized current value of a filter, for pre-filling its input."""
    raw = (request_params or {}).get(param_name)
    value = normalize(raw)
    if isinstance(value, list):
        return AppConstants.DISPLAY_SEPARATOR.join(value)
    return value


class FilterUiRenderer:

    def __init__(self, registry: FilterRegistry):
        self.registry = registry

    def _render_input(self, param_name: str, label: str, value: str, placeholder: str) -> str:
        return (
            '<label class="mdf-field">'
            f'<span class="mdf-label">{html.escape(label)}</span>'
            f'<input type="text" name="{html.escape(param_name, quote=True)}" '
            f'value="{html.escape(value, quote=True)}" '
            f'placeholder="{html.escape(placeholder, quote=True)}" />'
            '</label>'
        )

    def render(self, context: RenderContext, request_params: Optional[RequestParams], current_url: str,
               is_members_directory: bool = True) -> str:
        """
        Render the filter fieldset once per request.

        Every hook point may call this; only the first call with a given
        context produces markup, later ones return an empty string.
        """
        if not is_members_directory:
            return ""
        if not context.claim():
            logger.debug("Member filters already rendered for this request")
            return ""

        inputs: List[str] = [
            self._render_input(field.param_name, field.display_label,
                               current_value(request_params, field.param_name), field.placeholder)
            for field in self.registry
        ]
        reset_url = build_reset_url(current_url, self.registry.param_names())

        return (
            f'<fieldset id="{AppConstants.FIELDSET_ID}" class="mdf-filters">'
            f'<legend>{html.escape(AppMessage.FILTER_LEGEND)}</legend>'
            '<div class="mdf-grid">'
            + "".join(inputs)
            + f'<button type="submit" class="button" id="{AppConstants.APPLY_BUTTON_ID}">'
              f'{html.escape(AppMessage.APPLY)}</button>'
            + f'<a href="{html.escape(reset_url, quote=True)}" class="button" id="{AppConstants.RESET_BUTTON_ID}">'
              f'{html.escape(AppMessage.RESET)}</a>'
            '</div>'
            '</fieldset>'
        )
