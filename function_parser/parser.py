"""Function Parser — entry point that populates a deployment module's exports.

Typical ``main.py`` of a serverless deployment::

    from pathlib import Path
    from function_parser.parser import FunctionParser

    FunctionParser(root_path=Path(__file__).parent, exports=globals())

Invariants:
    - root_path is required; construction fails fast without it
    - Reactive pass runs (and is merged) before the endpoint pass
    - Each pass is merged into exports only after it completes: a failing pass
      publishes nothing, passes merged earlier stay merged (no rollback)
    - Running twice re-imports user modules and re-merges (not idempotent)

Design Decisions:
    - Passes return RegistrationResult values; this class is the only place that
      touches the caller's namespace
    - verbose → progress of the function_parser loggers shown at DEBUG on a
      configured handler
"""

import logging
from pathlib import Path
from types import ModuleType
from typing import Any, MutableMapping

from function_parser.config import Settings, get_settings
from function_parser.core.domain_types import ParserOptions
from function_parser.core.errors import RootPathRequiredError
from function_parser.core.registration import RegistrationResult
from function_parser.infrastructure.observability import setup_logging
from function_parser.services.endpoint_registrar import build_restful_api
from function_parser.services.reactive_registrar import build_reactive_functions

logger = logging.getLogger(__name__)

PACKAGE_LOGGER = "function_parser"


class FunctionParser:
    """Adds every discovered group and its functions/api to ``exports``."""

    def __init__(
        self,
        root_path: str | Path,
        exports: MutableMapping[str, Any] | ModuleType,
        options: ParserOptions | None = None,
        verbose: bool = False,
        settings: Settings | None = None,
    ):
        if not root_path:
            raise RootPathRequiredError()

        self.settings = settings or get_settings()
        self.root_path = root_path
        self.exports = exports
        self.options = options or ParserOptions.from_settings(self.settings)
        self.verbose = verbose
        self.result = RegistrationResult()

        if verbose:
            setup_logging(self.settings.log_level, self.settings.log_format)
            logging.getLogger(PACKAGE_LOGGER).setLevel(logging.DEBUG)

        if self.options.build_reactive:
            self._publish(build_reactive_functions(root_path, self.options, self.settings))

        if self.options.build_endpoints:
            self._publish(build_restful_api(root_path, self.options, self.settings))

    @property
    def enable_cors(self) -> bool:
        return self.options.enable_cors

    def _publish(self, result: RegistrationResult) -> None:
        result.merge_into(self.exports)
        self.result.update(result)
        logger.info(
            f"Registered {len(result.groups)} group(s) from {self.root_path}",
            extra={"group": ",".join(result.groups)},
        )
