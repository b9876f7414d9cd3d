"""ruamel.yaml loader with size limits for untrusted configuration text."""

from __future__ import annotations

import io
from pathlib import Path
from typing import Any

from ruamel.yaml import YAML
from ruamel.yaml.comments import CommentedMap, CommentedSeq

# ---------------------------------------------------------------------------
# Safety limits
# ---------------------------------------------------------------------------

MAX_DOCUMENT_SIZE = 5_000_000  # 5M characters
MAX_NODE_COUNT = 200_000


class YAMLSafetyError(Exception):
    """Raised when YAML input violates safety constraints.

    Distinct from parse errors: the text may be well-formed, but it is too
    large, or it expands (through aliases) into too many nodes to process.
    """


class ConfigLoader:
    """Loads YAML text into plain ``dict``/``list`` values.

    A fresh ruamel.yaml instance is used for every call, so one loader can
    be shared between threads.
    """

    def __init__(
        self,
        max_document_size: int = MAX_DOCUMENT_SIZE,
        max_node_count: int = MAX_NODE_COUNT,
    ) -> None:
        self.max_document_size = max_document_size
        self.max_node_count = max_node_count

    @staticmethod
    def _new_yaml() -> YAML:
        yaml = YAML()
        yaml.preserve_quotes = True
        return yaml

    # -- safety checks -------------------------------------------------------

    def _check_document_size(self, content: str) -> None:
        if len(content) > self.max_document_size:
            raise YAMLSafetyError(
                f"YAML document exceeds maximum size "
                f"({len(content):,} chars > {self.max_document_size:,} limit)"
            )

    def _check_node_count(self, data: Any) -> None:
        """Reject documents whose alias expansion yields too many nodes."""
        count = 0
        stack: list[Any] = [data]
        while stack:
            node = stack.pop()
            count += 1
            if count > self.max_node_count:
                raise YAMLSafetyError(
                    f"YAML document exceeds maximum node count ({self.max_node_count:,})"
                )
            if isinstance(node, dict):
                stack.extend(node.values())
            elif isinstance(node, list):
                stack.extend(node)

    # -- public loading API --------------------------------------------------

    def load_string(self, content: str) -> Any:
        """Parse YAML text.  Returns ``None`` for an empty document.

        Raises ``YAMLSafetyError`` for oversized input and lets ruamel.yaml
        errors propagate for malformed input.
        """
        self._check_document_size(content)
        data = self._new_yaml().load(content)
        if data is None:
            return None
        self._check_node_count(data)
        return self._to_plain_value(data)

    def load(self, path: Path) -> Any:
        """Load a YAML file from disk."""
        with path.open("r", encoding="utf-8") as handle:
            return self.load_string(handle.read())

    def dump_string(self, data: Any) -> str:
        """Serialise *data* as block-style YAML."""
        stream = io.StringIO()
        self._new_yaml().dump(data, stream)
        return stream.getvalue()

    def _to_plain_value(self, data: Any) -> Any:
        """Convert ruamel.yaml CommentedMap/Seq to plain Python dict/list."""
        if isinstance(data, (CommentedMap, dict)):
            return {str(k): self._to_plain_value(v) for k, v in data.items()}
        if isinstance(data, (CommentedSeq, list)):
            return [self._to_plain_value(item) for item in data]
        return data
