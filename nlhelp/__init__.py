"""Help page search widget: submit interception, search request, result rendering."""

from nlhelp.page.controller import SearchFormController
from nlhelp.page.render import RenderMode

__all__ = ["RenderMode", "SearchFormController"]
