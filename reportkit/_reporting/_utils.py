import base64
import datetime
import decimal
import json
import math
import re
import warnings

import numpy as np
import pandas as pd

from .. import _config
from .._utils import is_missing

_MAX_FILE_NAME_BYTES = 255

_ILLEGAL_CHARACTERS = re.compile(r'[/\\?<>:*|"]')
_CONTROL_CHARACTERS = re.compile(r"[\x00-\x1f\x7f-\x9f]")
_ONLY_DOTS_OR_SPACES = re.compile(r"^[. ]+$")
_LEADING_DOTS_OR_SPACES = re.compile(r"^[. ]+")
_TRAILING_DOTS_OR_SPACES = re.compile(r"[. ]+$")
_WINDOWS_RESERVED = re.compile(
    r"^(con|prn|aux|nul|com[0-9]|lpt[0-9])([.].*)?$", flags=re.IGNORECASE
)


def _truncate_utf8(s, max_bytes):
    return s.encode("utf-8")[:max_bytes].decode("utf-8", errors="ignore")


def sanitize_file_name(name, replacement="", default=None, extension=""):
    """Turn an arbitrary string into a name that can be used for a file.

    Path separators and characters that are not allowed in file names on
    common platforms are replaced, as well as control characters. Names that
    are reserved on Windows (``con``, ``nul``, ``lpt1``...) are dropped,
    leading and trailing dots and spaces are stripped, and the result (with
    ``extension`` appended) is truncated to 255 bytes once encoded in UTF-8.

    This never fails: when nothing is left, ``default`` (by default the
    ``download_file_name`` configuration) is used and a warning is emitted.

    Parameters
    ----------
    name : str
        The name to sanitize. Other objects are converted with ``str``.
    replacement : str, default=""
        Replaces each forbidden character.
    default : str, default=None
        Fallback name.
    extension : str, default=""
        Suffix such as ``".csv"``, appended after sanitization.

    Returns
    -------
    str
        The sanitized name, followed by ``extension``.

    Examples
    --------
    >>> from reportkit._reporting._utils import sanitize_file_name
    >>> sanitize_file_name("../etc/passwd")
    'etcpasswd'
    >>> sanitize_file_name("my: report?", extension=".csv")
    'my report.csv'
    """
    if default is None:
        default = _config.get_config()["download_file_name"]
    sanitized = "" if name is None else str(name)
    sanitized = _ILLEGAL_CHARACTERS.sub(replacement, sanitized)
    sanitized = _CONTROL_CHARACTERS.sub(replacement, sanitized)
    sanitized = _ONLY_DOTS_OR_SPACES.sub("", sanitized)
    sanitized = _LEADING_DOTS_OR_SPACES.sub("", sanitized)
    sanitized = _WINDOWS_RESERVED.sub("", sanitized)
    sanitized = _TRAILING_DOTS_OR_SPACES.sub("", sanitized)
    sanitized = _truncate_utf8(
        sanitized, _MAX_FILE_NAME_BYTES - len(extension.encode("utf-8"))
    )
    # truncation can expose a trailing dot or space again
    sanitized = _TRAILING_DOTS_OR_SPACES.sub("", sanitized)
    if not sanitized:
        warnings.warn(
            f"The file name {name!r} does not contain any character allowed in"
            f" file names; using {default!r} instead."
        )
        sanitized = default
    return sanitized + extension


def to_json_value(value):
    """Convert a dataframe cell to something ``json.dumps`` accepts.

    Missing values become ``None`` and non-finite floats become strings such
    as ``"inf"``, as JSON has no representation for them.
    """
    if is_missing(value):
        return None
    if isinstance(value, (np.generic,)):
        value = value.item()
    if isinstance(value, float) and not math.isfinite(value):
        return str(value)
    if isinstance(value, (list, tuple, np.ndarray)):
        return [to_json_value(v) for v in value]
    if isinstance(value, dict):
        return {str(k): to_json_value(v) for k, v in value.items()}
    return value


class JSONEncoder(json.JSONEncoder):
    def default(self, value):
        try:
            return super().default(value)
        except TypeError:
            if isinstance(value, np.integer):
                return int(value)
            if isinstance(value, np.floating):
                return float(value)
            if isinstance(value, np.bool_):
                return bool(value)
            if isinstance(value, (datetime.date, datetime.time)):
                return value.isoformat()
            if isinstance(value, (datetime.timedelta, pd.Timedelta)):
                return str(value)
            if isinstance(value, decimal.Decimal):
                return str(value)
            raise


def to_json(obj):
    return json.dumps(obj, cls=JSONEncoder, ensure_ascii=True)


def b64_encode(obj):
    return base64.b64encode(to_json(obj).encode("utf-8")).decode("utf-8")
