import sys
import traceback
from types import TracebackType
from typing import Optional, Type

# Top-level import name => distribution that provides it.
REQUIRED_DISTRIBUTIONS = {
    "google": "protobuf",
    "jinja2": "jinja2",
    "markupsafe": "jinja2",
}

IMPORT_ERROR_MESSAGE = (
    "protoc-gen-beefcake could not import `{module}`. Install the `{distribution}` "
    "package, or reinstall with `pip install beefcake-plugin` to pull in every "
    "dependency."
)


def missing_distribution(value: BaseException, tb: TracebackType) -> Optional[str]:
    """The distribution to install for an ImportError raised inside the plugin."""
    if not isinstance(value, ImportError) or not value.name or tb is None:
        return None
    frame = list(traceback.walk_tb(tb))[-1][0]
    if not frame.f_globals.get("__name__", "__main__").startswith(__name__):
        return None
    return REQUIRED_DISTRIBUTIONS.get(value.name.partition(".")[0])


def import_exception_hook(
    type: Type[BaseException], value: BaseException, tb: TracebackType
) -> None:
    distribution = missing_distribution(value, tb)
    if distribution is None:
        return sys.__excepthook__(type, value, tb)

    message = IMPORT_ERROR_MESSAGE.format(module=value.name, distribution=distribution)
    print(f"\033[31m{message}\033[0m", file=sys.stderr)
    sys.exit(1)


sys.excepthook = import_exception_hook

from .main import main
