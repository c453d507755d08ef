"""Pre-flight security scanner for raw XML input.

Rejects dangerous or oversized XML before it reaches the parser.  Checks
emptiness, size and entity declarations (billion laughs / XXE
prevention).  Well-formedness and nesting depth are checked later by the
parser and the converter.
"""

from __future__ import annotations

from xmljson.config import XMLToJSONConfig
from xmljson.errors import ConversionError, ErrorCode

_LARGE_INPUT_THRESHOLD_MB = 10


class XMLSecurityScanner:
    """Run pre-flight security checks on raw XML.

    Returns a list of errors/warnings.  Fatal errors (``E_*`` codes) mean
    the input should not be parsed.
    """

    def __init__(self, config: XMLToJSONConfig) -> None:
        self.config = config

    def scan(self, xml: str | bytes) -> list[ConversionError]:
        """Run all pre-flight checks.

        Returns:
            List of errors/warnings.  Fatal errors have codes starting
            with ``E_``.
        """
        errors: list[ConversionError] = []
        raw = xml.encode("utf-8") if isinstance(xml, str) else xml

        # --- 1. Empty input ---
        if not raw.strip():
            errors.append(
                ConversionError(
                    code=ErrorCode.E_PARSE_EMPTY,
                    message="XML input is empty",
                    stage="security",
                )
            )
            return errors

        # --- 2. Size limit ---
        size = len(raw)
        max_bytes = self.config.max_input_size_mb * 1024 * 1024
        if size > max_bytes:
            errors.append(
                ConversionError(
                    code=ErrorCode.E_SECURITY_TOO_LARGE,
                    message=(
                        f"Input size {size} bytes exceeds limit of "
                        f"{max_bytes} bytes ({self.config.max_input_size_mb} MB)"
                    ),
                    stage="security",
                )
            )
            return errors

        # --- 3. Large input warning ---
        large_threshold = _LARGE_INPUT_THRESHOLD_MB * 1024 * 1024
        if size > large_threshold:
            errors.append(
                ConversionError(
                    code=ErrorCode.W_LARGE_INPUT,
                    message=(
                        f"Input is {size / (1024 * 1024):.1f} MB "
                        f"(> {_LARGE_INPUT_THRESHOLD_MB} MB)"
                    ),
                    stage="security",
                    recoverable=True,
                )
            )

        if not self.config.reject_entity_declarations:
            return errors

        # --- 4. Entity declaration scan ---
        raw_upper = raw.upper()
        if b"<!ENTITY" in raw_upper:
            errors.append(
                ConversionError(
                    code=ErrorCode.E_SECURITY_ENTITY_DECLARATION,
                    message="Input contains <!ENTITY declaration (potential billion laughs / XXE attack)",
                    stage="security",
                )
            )
            return errors

        if b"<!DOCTYPE" in raw_upper:
            # An internal subset is opened by '[' before the closing '>'
            doctype_pos = raw_upper.find(b"<!DOCTYPE")
            bracket_pos = raw.find(b"[", doctype_pos)
            close_pos = raw.find(b">", doctype_pos)
            if bracket_pos != -1 and (close_pos == -1 or bracket_pos < close_pos):
                errors.append(
                    ConversionError(
                        code=ErrorCode.E_SECURITY_ENTITY_DECLARATION,
                        message="Input contains <!DOCTYPE with internal subset (potential entity expansion attack)",
                        stage="security",
                    )
                )
                return errors

        return errors
