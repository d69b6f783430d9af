#!/usr/bin/env python3
"""
Request template store for the Linear GraphQL client.

This module loads the named GraphQL documents the client sends. The
documents shipped with the package live in the ``graphql`` directory next
to this file, one ``<name>.graphql`` file per operation.
"""

import logging
from pathlib import Path
from typing import Dict, Iterable, List, Mapping

from .models import RequestTemplate


DEFAULT_TEMPLATE_DIR = Path(__file__).parent / "graphql"

TEMPLATE_NAMES = (
    "create-issue",
    "create-batch-issues",
    "create-project",
    "update-issue",
    "create-labels",
    "search-issues",
    "get-teams",
    "get-user",
    "get-project",
    "search-projects",
    "delete-issues",
)


class TemplateStore:
    """Read-only mapping from operation name to GraphQL document"""

    def __init__(self, templates: Mapping[str, RequestTemplate]):
        for name, template in templates.items():
            if not template.body.strip():
                raise ValueError(f"Request template '{name}' has an empty body")
        self._templates: Dict[str, RequestTemplate] = dict(templates)

    @classmethod
    def from_directory(cls, path) -> "TemplateStore":
        """Load every *.graphql file in a directory, keyed by file stem"""
        directory = Path(path).expanduser()
        if not directory.is_dir():
            raise FileNotFoundError(f"Template directory not found: {directory}")

        templates = {}
        for document in sorted(directory.glob("*.graphql")):
            templates[document.stem] = RequestTemplate(
                name=document.stem,
                body=document.read_text(encoding="utf-8"),
            )
        logging.debug(f"Loaded {len(templates)} request templates from {directory}")
        return cls(templates)

    @classmethod
    def default(cls) -> "TemplateStore":
        """Load the documents shipped with the package"""
        return cls.from_directory(DEFAULT_TEMPLATE_DIR)

    def get(self, name: str) -> RequestTemplate:
        """Get a template by name"""
        try:
            return self._templates[name]
        except KeyError:
            raise KeyError(f"Unknown request template: {name}") from None

    def require(self, names: Iterable[str]) -> Dict[str, RequestTemplate]:
        """Resolve several templates at once, failing on the first missing one"""
        return {name: self.get(name) for name in names}

    def names(self) -> List[str]:
        return sorted(self._templates)

    def __contains__(self, name: object) -> bool:
        return name in self._templates

    def __len__(self) -> int:
        return len(self._templates)
