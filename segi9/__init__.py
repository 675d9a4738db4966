"""Segi9 HTTP plugin for monitoring agents.

Runs a single HTTP(S) GET per check, with optional Basic or Bearer
authentication, and returns the raw response body for agent-side
preprocessing.

Example:
```python
    from segi9 import Segi9Plugin

    plugin = Segi9Plugin()
    plugin.configure(options={"Timeout": "5", "SkipVerify": "false"})
    body = plugin.export("segi9.http", ["https://api.example.com/status"])
```
"""

from ._config import ConfigCandidate, Configuration, GlobalOptions
from ._plugin import Segi9Plugin
from ._services import ConfigStore, RequestExecutor, dispatch, validate_config
from ._utils import RequestSpec

__all__ = [
    "ConfigCandidate",
    "ConfigStore",
    "Configuration",
    "GlobalOptions",
    "RequestExecutor",
    "RequestSpec",
    "Segi9Plugin",
    "dispatch",
    "validate_config",
]
