"""Core verification engine: primitives, streaming, parsing, outcomes."""

from digestcheck.core.primitive import (
    ALGORITHMS,
    DEFAULT_ALGORITHM,
    Digest,
    DigestPrimitive,
    get_primitive_factory,
)
from digestcheck.core.stream import StreamDigester, digest_stream
from digestcheck.core.parser import (
    ManifestEntry,
    format_digest_line,
    parse_manifest_line,
)
from digestcheck.core.outcome import (
    BadFormat,
    MatchFailed,
    MatchSuccess,
    Outcome,
    OutcomeKind,
    ReadError,
)
from digestcheck.core.verify import VerificationEngine
from digestcheck.core.config import RunConfiguration, ToolConfig, load_tool_config

__all__ = [
    "ALGORITHMS",
    "DEFAULT_ALGORITHM",
    "Digest",
    "DigestPrimitive",
    "get_primitive_factory",
    "StreamDigester",
    "digest_stream",
    "ManifestEntry",
    "format_digest_line",
    "parse_manifest_line",
    "BadFormat",
    "MatchFailed",
    "MatchSuccess",
    "Outcome",
    "OutcomeKind",
    "ReadError",
    "VerificationEngine",
    "RunConfiguration",
    "ToolConfig",
    "load_tool_config",
]
