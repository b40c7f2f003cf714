"""Error taxonomy shared by the store, the actions and the HTTP layer."""


class GameError(Exception):
    def __init__(self, code: str, message: str):
        super().__init__(message)
        self.code = code
        self.message = message


class BadRequest(GameError):
    """Missing username/action; answered with a 400."""


class GameRuleViolation(GameError):
    """A game outcome the chat should print; never an HTTP failure."""


class EmptyCatalogError(GameRuleViolation):
    def __init__(self):
        super().__init__("E_EMPTY_CATALOG", "No hay brainrots para farmear.")


class NotFound(GameError):
    """Single-record lookup miss."""


class StoreError(GameError):
    """Unexpected persistence failure; answered with a 500."""
