"""Interactive terminal front end for the news tracker."""

from collections.abc import Awaitable, Callable
from typing import TypeVar

from newstracker.app import NewsTracker
from newstracker.data import SentimentFilter, SortOrder
from newstracker.render import render
from newstracker.state import View

HELP = """Commands:
  <text>              search for <text> (or store it as API key during setup)
  /search [text]      show live news, optionally searching for <text>
  /saved              show saved searches
  /bookmarks          show bookmarked articles
  /add <text>         save a search
  /remove <n|text>    delete a saved search
  /run <n|text>       run a saved search
  /star <n>           bookmark or unbookmark article <n> of the current view
  /filter key=value   set language, country, sentiment (positive|neutral|negative|any)
                      or sort (publish-time|relevance)
  /settings           enter a new API key
  /key <value>        store the API key
  /help               show this help
  /quit               exit"""

KEY_SHADOWED = "Key stored, but the key configured in the environment is used instead."

T = TypeVar("T")

FILTER_KEYS = {
    "language": "language",
    "country": "source_country",
    "sentiment": "sentiment",
    "sort": "sort_by",
}


class CommandError(ValueError):
    """A command could not be understood."""


Handler = Callable[[NewsTracker, str], Awaitable[str | None]]


async def handle_line(app: NewsTracker, line: str) -> str | None:
    """Execute one line of user input.

    Args:
        app: The view controller to act on.
        line: Raw input line.

    Returns:
        Text to show the user, or None when the user asked to quit.
    """
    line = line.strip()
    if not line.startswith("/"):
        if app.state.active_view == View.CREDENTIAL_SETUP:
            return await _key(app, line)
        if line:
            await app.search(line)
        return render(app.state)

    name, _, arg = line[1:].partition(" ")
    handler = COMMANDS.get(name.lower())
    if handler is None:
        return f"Unknown command: /{name}. Type /help for a list of commands."
    try:
        return await handler(app, arg.strip())
    except CommandError as e:
        return str(e)


async def _help(app: NewsTracker, arg: str) -> str:
    return HELP


async def _quit(app: NewsTracker, arg: str) -> None:
    return None


async def _search(app: NewsTracker, arg: str) -> str:
    app.switch_view(View.SEARCH)
    if arg:
        await app.search(arg)
    return render(app.state)


async def _saved(app: NewsTracker, arg: str) -> str:
    app.switch_view(View.SAVED_QUERIES)
    return render(app.state)


async def _bookmarks(app: NewsTracker, arg: str) -> str:
    app.switch_view(View.BOOKMARKS)
    return render(app.state)


async def _add(app: NewsTracker, arg: str) -> str:
    app.add_saved_query(arg)
    app.switch_view(View.SAVED_QUERIES)
    return render(app.state)


async def _remove(app: NewsTracker, arg: str) -> str:
    app.remove_saved_query(_saved_query(app, arg))
    app.switch_view(View.SAVED_QUERIES)
    return render(app.state)


async def _run(app: NewsTracker, arg: str) -> str:
    await app.run_saved_query(_saved_query(app, arg))
    return render(app.state)


async def _star(app: NewsTracker, arg: str) -> str:
    state = app.state
    articles = state.bookmarks if state.tab == View.BOOKMARKS else state.results
    app.toggle_bookmark(_pick(articles, arg, "article"))
    return render(app.state)


async def _filter(app: NewsTracker, arg: str) -> str:
    changes: dict[str, object] = {}
    for pair in arg.split():
        key, sep, value = pair.partition("=")
        field = FILTER_KEYS.get(key.lower())
        if not sep or field is None:
            raise CommandError(f"Unknown filter: {pair}. Use {', '.join(FILTER_KEYS)}.")
        changes[field] = _filter_value(field, value.strip())
    if changes:
        app.set_filters(**changes)
    f = app.state.filters
    return (
        f"Filters: language={f.language} country={f.source_country or 'all'} "
        f"sentiment={f.sentiment or 'any'} sort={f.sort_by}"
    )


async def _settings(app: NewsTracker, arg: str) -> str:
    app.open_settings()
    return render(app.state)


async def _key(app: NewsTracker, arg: str) -> str:
    if not app.save_api_key(arg):
        return "API key must not be empty.\n" + render(app.state)
    if app.key_from_environment:
        return KEY_SHADOWED + "\n" + render(app.state)
    return render(app.state)


def _filter_value(field: str, value: str) -> object:
    try:
        if field == "sentiment":
            return SentimentFilter("" if value.lower() == "any" else value.lower())
        if field == "sort_by":
            return SortOrder(value.lower())
    except ValueError as e:
        raise CommandError(f"Invalid value for {field}: {value}") from e
    if field == "source_country" and value.lower() in ("all", "any"):
        return ""
    return value.lower()


def _saved_query(app: NewsTracker, arg: str) -> str:
    if arg.isdigit():
        return _pick(app.state.saved_queries, arg, "saved search")
    if not arg:
        raise CommandError("Missing saved search.")
    return arg


def _pick(items: tuple[T, ...], arg: str, what: str) -> T:
    if not arg.isdigit() or not 1 <= int(arg) <= len(items):
        raise CommandError(f"No {what} numbered {arg!r}.")
    return items[int(arg) - 1]


COMMANDS: dict[str, Handler] = {
    "help": _help,
    "quit": _quit,
    "exit": _quit,
    "search": _search,
    "saved": _saved,
    "bookmarks": _bookmarks,
    "add": _add,
    "remove": _remove,
    "run": _run,
    "star": _star,
    "filter": _filter,
    "settings": _settings,
    "key": _key,
}
