from collections import OrderedDict

# In-memory cache of answered requests keyed by (username, request_id).
# Oldest answers are evicted past MAX_ENTRIES.
MAX_ENTRIES = 1024
_CACHE: "OrderedDict[tuple[str, str], dict]" = OrderedDict()


def lookup(username: str, request_id: str) -> dict | None:
    return _CACHE.get((username, request_id))


def persist(username: str, request_id: str, verb: str, target: str | None, text: str) -> None:
    _CACHE[(username, request_id)] = {
        "username": username,
        "request_id": request_id,
        "verb": verb,
        "target": target,
        "text": text,
    }
    _CACHE.move_to_end((username, request_id))
    while len(_CACHE) > MAX_ENTRIES:
        _CACHE.popitem(last=False)


def clear() -> None:
    _CACHE.clear()
