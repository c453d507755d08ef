"""XMLToJSONConverter -- orchestrator and public API for xmljson.

Routes raw XML through the conversion pipeline:

1. Security scan via :class:`XMLSecurityScanner`.
2. Parse with :mod:`xml.etree.ElementTree`.
3. Convert via :func:`convert_tree`.
4. Report overrides that never matched.
5. Assemble and return :class:`ConversionResult`.

``process()`` enforces **fail-closed** semantics: any fatal error returns a
result with error codes and no value.  ``xml_string_to_json()`` runs the
same pipeline and raises :class:`XMLConversionError` instead.
"""

from __future__ import annotations

import asyncio
import logging
import time
import xml.etree.ElementTree as ET
from typing import Any

from xmljson.config import XMLToJSONConfig
from xmljson.converter import convert_tree
from xmljson.errors import ConversionError, ErrorCode, XMLConversionError
from xmljson.models import ConversionResult, TreeConversion
from xmljson.security import XMLSecurityScanner

logger = logging.getLogger("xmljson")


class XMLToJSONConverter:
    """Top-level orchestrator for XML to JSON conversion.

    Parameters
    ----------
    config:
        Conversion configuration.  Uses defaults when *None*.
    """

    def __init__(self, config: XMLToJSONConfig | None = None) -> None:
        self._config = config or XMLToJSONConfig()
        self._security_scanner = XMLSecurityScanner(self._config)

    @property
    def config(self) -> XMLToJSONConfig:
        return self._config

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def convert(self, xml: str | bytes) -> dict[str, Any]:
        """Convert raw XML into a JSON value.

        Raises
        ------
        XMLConversionError
            On rejected, empty or malformed input, or excessive nesting.
        """
        return self._run(xml)[0].value

    def convert_element(self, root: ET.Element) -> dict[str, Any]:
        """Convert an already-parsed element tree into a JSON value."""
        return convert_tree(root, self._config).value

    def process(self, xml: str | bytes) -> ConversionResult:
        """Convert raw XML and report statistics instead of raising.

        Returns
        -------
        ConversionResult
            The fully-assembled result.  ``errors`` is non-empty and
            ``value`` is None when a fatal error occurred.
        """
        start = time.monotonic()
        try:
            tree, warnings = self._run(xml)
        except XMLConversionError as exc:
            elapsed = time.monotonic() - start
            return ConversionResult(
                errors=[exc.code.value],
                error_details=[exc.error],
                processing_time_seconds=elapsed,
            )

        elapsed = time.monotonic() - start
        return ConversionResult(
            value=tree.value,
            root_tag=tree.root_tag,
            total_elements=tree.total_elements,
            max_depth=tree.max_depth,
            warnings=[w.code.value for w in warnings],
            error_details=warnings,
            processing_time_seconds=elapsed,
        )

    async def aprocess(self, xml: str | bytes) -> ConversionResult:
        """Async wrapper around :meth:`process`.

        Offloads the synchronous ``process()`` call to a thread via
        ``asyncio.to_thread()``.
        """
        return await asyncio.to_thread(self.process, xml)

    # ------------------------------------------------------------------
    # Internal
    # ------------------------------------------------------------------

    def _run(self, xml: str | bytes) -> tuple[TreeConversion, list[ConversionError]]:
        start = time.monotonic()

        # ==============================================================
        # Step 1: Security Scan
        # ==============================================================
        scan_errors = self._security_scanner.scan(xml)
        fatal_errors = [e for e in scan_errors if e.code.value.startswith("E_")]
        warnings = [e for e in scan_errors if not e.code.value.startswith("E_")]

        if fatal_errors:
            first = fatal_errors[0]
            logger.error(
                "xmljson | stage=%s | code=%s | detail=%s",
                first.stage,
                first.code.value,
                first.message,
            )
            raise XMLConversionError(**first.model_dump())

        # ==============================================================
        # Step 2: Parse
        # ==============================================================
        try:
            root = ET.fromstring(xml)  # noqa: S314
        except (ET.ParseError, LookupError, ValueError) as exc:
            # LookupError: unknown encoding named in the XML declaration
            logger.error(
                "xmljson | stage=parse | code=%s | detail=%s",
                ErrorCode.E_SECURITY_INVALID_XML.value,
                exc,
            )
            raise XMLConversionError(
                code=ErrorCode.E_SECURITY_INVALID_XML,
                message=f"Invalid XML: {exc}",
                stage="parse",
            ) from exc

        # ==============================================================
        # Step 3: Convert
        # ==============================================================
        try:
            tree = convert_tree(root, self._config)
        except XMLConversionError as exc:
            logger.error(
                "xmljson | stage=%s | code=%s | xpath=%s | detail=%s",
                exc.stage,
                exc.code.value,
                exc.xpath,
                exc.message,
            )
            raise

        # ==============================================================
        # Step 4: Unused overrides
        # ==============================================================
        for path in tree.unused_overrides:
            warnings.append(
                ConversionError(
                    code=ErrorCode.W_UNUSED_OVERRIDE,
                    message=f"Override for {path} did not match any element or attribute",
                    stage="convert",
                    recoverable=True,
                    xpath=path,
                )
            )

        elapsed = time.monotonic() - start
        logger.info(
            "xmljson | root=%s | elements=%d | depth=%d | warnings=%d | time=%.3fs",
            tree.root_tag,
            tree.total_elements,
            tree.max_depth,
            len(warnings),
            elapsed,
        )
        return tree, warnings


def xml_string_to_json(
    xml: str | bytes,
    config: XMLToJSONConfig | None = None,
) -> dict[str, Any]:
    """Convert an XML document string into a JSON value.

    Example::

        >>> xml_string_to_json('<a attr1="1"><b>x</b></a>')
        {'a': {'@attr1': 1, 'b': 'x'}}

    Raises
    ------
    XMLConversionError
        On rejected, empty or malformed input, or excessive nesting.
    """
    return XMLToJSONConverter(config).convert(xml)
