"""
Rendering backend that turns SVG documents into output files and images.
"""
import io
import logging
from pathlib import Path
from typing import Callable, Optional, Tuple, Union

from PIL import Image

from vecdraw.core import Profiler
from vecdraw.utils.io import save_svg

logger = logging.getLogger(__name__)

SUPPORTED_FORMATS = ("png", "svg", "pdf", "eps")


class RenderError(Exception):
    """Exception raised when the rendering backend fails."""
    pass


def format_from_filename(filename: Union[str, Path]) -> Optional[str]:
    """
    Output format implied by a filename extension.

    Returns:
        Lower-case format name, or None for unsupported extensions
    """
    suffix = Path(str(filename)).suffix.lower().lstrip(".")
    return suffix if suffix in SUPPORTED_FORMATS else None


class SVGRenderer:
    """
    Writes SVG documents as SVG, PNG, PDF or EPS files.

    SVG output is written directly; the other formats go through cairosvg.
    """

    def __init__(self, scale: float = 1.0):
        """
        Initialize the SVG renderer.

        Args:
            scale: Scale factor applied when rasterising or converting
        """
        self.scale = scale
        self._cairosvg = None

    def _backend(self):
        """Import cairosvg on first use."""
        if self._cairosvg is None:
            try:
                import cairosvg
            except (ImportError, OSError) as e:
                raise RenderError(f"cairosvg backend is not available: {e}") from e
            self._cairosvg = cairosvg
        return self._cairosvg

    def _converter(self, fmt: str) -> Callable:
        backend = self._backend()
        return {
            "png": backend.svg2png,
            "pdf": backend.svg2pdf,
            "eps": backend.svg2eps,
        }[fmt]

    def render(
        self,
        svg_code: str,
        output_path: Union[str, Path],
        fmt: Optional[str] = None
    ) -> Path:
        """
        Write SVG code to a file in the requested format.

        Args:
            svg_code: SVG document text
            output_path: Destination file
            fmt: Output format; derived from the extension when omitted

        Returns:
            Path of the written file

        Raises:
            RenderError: If the format is unsupported or the backend fails
        """
        output_path = Path(output_path)
        fmt = (fmt or format_from_filename(output_path) or "").lower()
        if fmt not in SUPPORTED_FORMATS:
            raise RenderError(f"Unsupported output format for {output_path}")

        if fmt == "svg":
            return save_svg(svg_code, output_path)

        output_path.parent.mkdir(exist_ok=True, parents=True)
        converter = self._converter(fmt)
        try:
            with Profiler(f"render {fmt}"):
                converter(
                    bytestring=svg_code.encode("utf-8"),
                    write_to=str(output_path),
                    scale=self.scale,
                )
        except Exception as e:
            logger.error(f"Error rendering {output_path}: {e}")
            logger.debug(f"Problematic SVG code: {svg_code[:100]}...")
            raise RenderError(f"Rendering {output_path} failed: {e}") from e

        logger.info(f"{fmt.upper()} saved to: {output_path}")
        return output_path

    def render_image(self, svg_code: str, size: Optional[Tuple[int, int]] = None) -> Image.Image:
        """
        Convert SVG code to a PIL Image.

        Args:
            svg_code: SVG document text
            size: Optional (width, height) of the rendered image

        Returns:
            PIL Image of the rendered SVG
        """
        backend = self._backend()
        kwargs = {"bytestring": svg_code.encode("utf-8")}
        if size:
            kwargs["output_width"], kwargs["output_height"] = size
        else:
            kwargs["scale"] = self.scale

        try:
            png_data = backend.svg2png(**kwargs)
        except Exception as e:
            logger.error(f"Error rendering SVG: {e}")
            raise RenderError(f"Rendering SVG to an image failed: {e}") from e

        image = Image.open(io.BytesIO(png_data))
        image.load()
        return image

    def convert_file(
        self,
        svg_path: Union[str, Path],
        output_path: Union[str, Path]
    ) -> Path:
        """
        Convert an SVG file into another format.

        Args:
            svg_path: Path to the SVG file
            output_path: Destination; its extension selects the format
        """
        svg_path = Path(svg_path)

        if not svg_path.exists():
            raise FileNotFoundError(f"SVG file not found: {svg_path}")

        with open(svg_path, 'r', encoding='utf-8') as f:
            svg_code = f.read()

        return self.render(svg_code, output_path)
