"""
Raster query parameters

A query is a bounding box plus the pixel width of the viewport it will be
drawn into. Parsing requests is left to the transport layer; this module
only accepts already-decoded values.
"""

from dataclasses import dataclass
from typing import Any, Mapping

from quadraster.core.exceptions import QueryError

REQUIRED_PARAMS = ("ullon", "ullat", "lrlon", "lrlat", "w")


@dataclass(frozen=True)
class RasterQuery:
    """
    Bounding box and viewport width of a map view

    The box is used exactly as given; it is not reordered to match the
    root tile's orientation.

    Attributes:
        ullon: Upper-left longitude
        ullat: Upper-left latitude
        lrlon: Lower-right longitude
        lrlat: Lower-right latitude
        width: Viewport width in pixels
        height: Viewport height in pixels (not used for tile selection)

    Examples:
        >>> query = RasterQuery(-122.24, 37.87, -122.22, 37.85, width=512)
        >>> round(query.lon_dpp, 8)
        3.906e-05
    """

    ullon: float
    ullat: float
    lrlon: float
    lrlat: float
    width: float
    height: float | None = None

    @property
    def lon_dpp(self) -> float:
        """Longitude distance per pixel requested by the viewport"""
        return abs(self.ullon - self.lrlon) / self.width

    @property
    def is_satisfiable(self) -> bool:
        """
        Whether the viewport width allows any selection at all

        An infinite width is satisfiable: its LonDPP is 0, which selects the
        deepest level. Zero, negative, and NaN widths are not.
        """
        return self.width > 0

    @classmethod
    def from_params(cls, params: Mapping[str, Any]) -> "RasterQuery":
        """
        Build a query from decoded request parameters

        Args:
            params: Mapping with keys ullon, ullat, lrlon, lrlat, w and
                optionally h

        Raises:
            QueryError: If a required key is missing or not numeric
        """
        missing = [k for k in REQUIRED_PARAMS if k not in params]
        if missing:
            raise QueryError(f"Missing query parameters: {', '.join(missing)}")

        try:
            values = {k: float(params[k]) for k in REQUIRED_PARAMS}
            height = float(params["h"]) if params.get("h") is not None else None
        except (TypeError, ValueError) as e:
            raise QueryError(f"Query parameters must be numeric: {e}") from e

        return cls(
            ullon=values["ullon"],
            ullat=values["ullat"],
            lrlon=values["lrlon"],
            lrlat=values["lrlat"],
            width=values["w"],
            height=height,
        )

    def to_params(self) -> dict[str, float]:
        params = {
            "ullon": self.ullon,
            "ullat": self.ullat,
            "lrlon": self.lrlon,
            "lrlat": self.lrlat,
            "w": self.width,
        }
        if self.height is not None:
            params["h"] = self.height
        return params
