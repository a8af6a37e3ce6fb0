# SPDX-License-Identifier: LGPL-3-or-later
from enum import Enum
from fnmatch import fnmatchcase
import os
import sys
from functools import lru_cache


class LogType(Enum):
    Default = "default"
    Regex = "regex"
    Resolve = "resolve"

    @property
    def diagnostic(self):
        return self is not LogType.Default


@lru_cache(typed=True)
def __parse_log_env_var(silencelog_raw):
    """map every LogType to whether it is silenced

    unset: nothing is silenced.  "", "1", "true": everything is.  "0",
    "false": nothing is.  otherwise a comma-separated list of fnmatch
    patterns over the kind names, "!pattern" re-enables matching kinds.
    """
    if silencelog_raw is None:
        return {k: False for k in LogType}
    patterns = [v.strip() for v in silencelog_raw.lower().split(",")]
    if len(patterns) > 1 and patterns[-1] == "":
        # allow trailing comma
        patterns.pop()

    retval = {k: True for k in LogType}
    if patterns in (["0"], ["false"]):
        return {k: False for k in LogType}
    if patterns in (["1"], ["true"], [""]):
        return retval

    for pattern in patterns:
        silenced = not pattern.startswith("!")
        pattern = pattern.lstrip("!")
        kinds = [k for k in LogType if fnmatchcase(k.value, pattern)]
        assert kinds, (f"SILENCELOG: {pattern!r} did not match any known "
                       f"LogType: {' '.join(k.value for k in LogType)}")
        for k in kinds:
            retval[k] = silenced
    return retval


def log(*args, kind=LogType.Default, **kwargs):
    """verbose printing, can be disabled by setting env var "SILENCELOG".
    diagnostics (pattern errors, resolution) go to stderr unless a file is
    given.
    """
    silenced = __parse_log_env_var(os.environ.get("SILENCELOG"))
    if silenced[kind]:
        return
    if kind.diagnostic:
        kwargs.setdefault("file", sys.stderr)
    print(*args, **kwargs)
