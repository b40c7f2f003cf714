# Import handlers so decorators run
from . import farm, help, inventory, steal  # noqa: F401
from .registry import (  # noqa: F401
    ALIASES,
    Action,
    ActionContext,
    action,
    get_action,
    list_actions,
    parse_action,
)
