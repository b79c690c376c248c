"""Analyze naming use case: drive the rules over parsed modules and collect violations."""

import logging
from collections.abc import Iterable, Sequence
from pathlib import Path

import astroid

from naming_linter.domain.config import ConfigurationLoader
from naming_linter.domain.entities import AnalysisResult, FileAnalysis, ViolationRecord
from naming_linter.domain.protocols import NamingGatewayProtocol
from naming_linter.domain.rules import NamingRule, RuleDispatcher


class AnalyzeNamingUseCase:
    """
    Traversal driver for the command line.

    Walks each module's classes in document order and hands every
    declaration node to the handlers registered for its kind.
    """

    def __init__(
        self,
        rules: Sequence[NamingRule],
        gateway: NamingGatewayProtocol,
        config_loader: ConfigurationLoader,
    ) -> None:
        self._rules = tuple(rules)
        self._gateway = gateway
        self._config_loader = config_loader

    def analyze_module(self, module: astroid.nodes.Module) -> list[ViolationRecord]:
        """Run every rule over one module. A fresh sink per call; nothing accumulates."""
        violations: list[ViolationRecord] = []
        handlers = RuleDispatcher.build(self._rules, violations.append)
        for kind, node in self._gateway.iter_nodes(module):
            RuleDispatcher.dispatch(handlers, kind, node)
        return violations

    def analyze_file(self, path: Path) -> FileAnalysis:
        try:
            module = self._gateway.parse_file(path)
        except astroid.AstroidSyntaxError as exc:
            logging.warning("Skipping %s: syntax error: %s", path, exc)
            return FileAnalysis(path=str(path), error=f"syntax error: {exc}")
        except (OSError, UnicodeDecodeError) as exc:
            logging.warning("Skipping %s: %s", path, exc)
            return FileAnalysis(path=str(path), error=str(exc))
        return FileAnalysis(path=str(path), violations=tuple(self.analyze_module(module)))

    def collect_files(self, paths: Iterable[Path]) -> list[Path]:
        """Expand directories to their *.py files (sorted), dropping excluded paths."""
        files: list[Path] = []
        for path in paths:
            candidates = sorted(path.rglob("*.py")) if path.is_dir() else [path]
            for candidate in candidates:
                if self._config_loader.is_excluded(str(candidate)):
                    logging.debug("Excluded by config: %s", candidate)
                    continue
                files.append(candidate)
        return files

    def execute(self, paths: Iterable[Path]) -> AnalysisResult:
        files = self.collect_files(paths)
        logging.debug("Analyzing %d file(s)", len(files))
        return AnalysisResult(files=tuple(self.analyze_file(path) for path in files))
