"""
SVG validation for documents produced by vecdraw.
"""
import logging
from typing import Dict, Optional, Set, Tuple

from defusedxml import ElementTree

logger = logging.getLogger(__name__)


class SVGValidator:
    """
    Validates SVG documents.

    Checks that the document is well-formed XML without DTDs or entities,
    uses only the elements and attributes vecdraw emits, and does not
    reference external resources.
    """

    def __init__(self, max_svg_size: Optional[int] = None):
        """
        Initialize the SVG validator.

        Args:
            max_svg_size: Optional maximum document size in bytes
        """
        self.max_svg_size = max_svg_size
        self.allowed_elements = self._get_allowed_elements()

    def _get_allowed_elements(self) -> Dict[str, Set[str]]:
        """
        Define allowed SVG elements and attributes.

        Returns:
            Dictionary mapping element names to sets of allowed attributes
        """
        common_attrs = {
            'id', 'clip-path', 'clip-rule', 'fill', 'fill-opacity', 'fill-rule',
            'opacity', 'stroke', 'stroke-dasharray', 'stroke-dashoffset',
            'stroke-linecap', 'stroke-linejoin', 'stroke-miterlimit',
            'stroke-opacity', 'stroke-width', 'transform', 'space',
        }

        return {
            'common': common_attrs,
            'svg': {'width', 'height', 'viewBox', 'version'},
            'g': set(),
            'defs': set(),
            'clipPath': {'clipPathUnits'},
            'rect': {'x', 'y', 'width', 'height'},
            'path': {'d'},
            'text': {'x', 'y', 'font-family', 'font-size', 'text-anchor'},
            'title': set(),
        }

    def validate(self, svg_code: str) -> Tuple[bool, Optional[str]]:
        """
        Validate an SVG string.

        Args:
            svg_code: The SVG string to validate

        Returns:
            Tuple of (is_valid, error_message)
        """
        if self.max_svg_size is not None:
            svg_size = len(svg_code.encode('utf-8'))
            if svg_size > self.max_svg_size:
                return False, f"SVG exceeds allowed size: {svg_size} bytes (max: {self.max_svg_size})"

        try:
            tree = ElementTree.fromstring(
                svg_code.encode('utf-8'),
                forbid_dtd=True,
                forbid_entities=True,
                forbid_external=True,
            )
        except Exception as e:
            return False, f"Invalid XML: {str(e)}"

        if tree.tag.split('}')[-1] != 'svg':
            return False, f"Root element must be svg, got {tree.tag}"

        for element in tree.iter():
            tag_name = element.tag.split('}')[-1]
            if tag_name not in self.allowed_elements or tag_name == 'common':
                return False, f"Disallowed element: {tag_name}"

            for attr, attr_value in element.attrib.items():
                attr_name = attr.split('}')[-1]
                if (
                    attr_name not in self.allowed_elements[tag_name]
                    and attr_name not in self.allowed_elements['common']):
                    return False, f"Disallowed attribute: {attr_name} on element {tag_name}"

                if 'data:' in attr_value.lower():
                    return False, f"Embedded data not allowed in attribute: {attr_name}"

                if attr_name == 'clip-path' and not attr_value.startswith('url(#'):
                    return False, f"Invalid clip-path reference in <{tag_name}>: {attr_value}"

        logger.debug("SVG document passed validation")
        return True, None
