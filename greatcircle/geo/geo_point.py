"""Geographic point value type.

A GeoPoint is an immutable (latitude, longitude, height) triple with the
angles held in radians and the height in meters. It is the currency of the
spherical formulas in ``greatcircle.geo.spherical``; the convenience methods
here simply delegate to them.

Latitude and Longitude are Degree unit families used when presenting a
point; they keep latitudes and longitudes from being mixed up in
arithmetic.
"""

from __future__ import annotations

from dataclasses import dataclass, replace

from ..config import MEAN_EARTH_RADIUS
from ..unit import Angle, Degree, Length, Meter, Radian, negative_pi_to_pi


class Latitude(Degree):
    """Latitude in degrees, stored internally as radians."""

    IS_FAMILY_ROOT = True
    SYMBOL = "°N/S"


class Longitude(Degree):
    """Longitude in degrees, stored internally as radians."""

    IS_FAMILY_ROOT = True
    SYMBOL = "°E/W"


@dataclass(frozen=True)
class GeoPoint:
    """A position on the sphere.

    No range checks are made. A latitude outside [-π/2, π/2] gives results
    that are mathematically defined but geographically meaningless, and
    longitudes may lie outside (-π, π] (destinations are returned that way).

    Attributes:
        latitude (float): Latitude φ in radians, positive north.
        longitude (float): Longitude λ in radians, positive east.
        height (float): Height in meters. Carried along, never read by the formulas.

    Example:
        >>> lizard = GeoPoint.from_deg(50.0667, -5.7167)
        >>> groats = GeoPoint.from_deg(58.6439, -3.07)
        >>> round(float(lizard.distance_to(groats).to(Meter)) / 1000)
        969
    """

    latitude: float
    longitude: float
    height: float = 0.0

    @classmethod
    def from_deg(cls, lat: float, lon: float, height: float = 0.0) -> GeoPoint:
        """Create a GeoPoint from latitude and longitude in decimal degrees.

        Args:
            lat (float): Latitude in degrees, negative south.
            lon (float): Longitude in degrees, negative west.
            height (float): Height in meters.

        Returns:
            GeoPoint: New point with the angles converted to radians.
        """
        return cls(float(Latitude(lat)), float(Longitude(lon)), float(height))

    @classmethod
    def from_rad(cls, lat: float, lon: float, height: float = 0.0) -> GeoPoint:
        """Create a GeoPoint from latitude and longitude in radians."""
        return cls(float(lat), float(lon), float(height))

    @property
    def lat_deg(self) -> float:
        """Latitude in decimal degrees."""
        return Latitude.from_si(self.latitude).to(Latitude)

    @property
    def lon_deg(self) -> float:
        """Longitude in decimal degrees, as stored (not normalised)."""
        return Longitude.from_si(self.longitude).to(Longitude)

    def normalized(self) -> GeoPoint:
        """Return a copy with the longitude folded into [-π, π]."""
        return replace(self, longitude=negative_pi_to_pi(self.longitude))

    def distance_to(self, other: GeoPoint, radius: float = MEAN_EARTH_RADIUS) -> Meter:
        """Great-circle surface distance to ``other``.

        Args:
            other (GeoPoint): Target point.
            radius (float): Sphere radius in meters (or any Length unit).

        Returns:
            Meter: Distance along the sphere's surface.
        """
        from .spherical import great_circle_ground_distance

        return Meter(great_circle_ground_distance(self, other, radius))

    def bearing_to(self, other: GeoPoint) -> Radian:
        """Initial great-circle bearing towards ``other``, in [0, 2π)."""
        from .spherical import great_circle_initial_bearing

        return Radian(great_circle_initial_bearing(self, other))

    def forward(
        self, azimuth: Angle, distance: Length, radius: float = MEAN_EARTH_RADIUS
    ) -> GeoPoint:
        """Point reached by traveling ``distance`` from here along ``azimuth``.

        This point is left untouched; the new one has height 0 and an
        un-normalised longitude.

        Args:
            azimuth (Angle): Bearing from north (Degree(90) is east). Plain floats are radians.
            distance (Length): Distance to travel. Plain floats are meters.
            radius (float): Sphere radius in meters.

        Returns:
            GeoPoint: Destination point.

        Example:
            >>> origin = GeoPoint.from_deg(0, 0)
            >>> round(origin.forward(Degree(90), Meter(111195)).lon_deg, 3)
            1.0
        """
        from .spherical import great_circle_destination

        return great_circle_destination(self, distance, azimuth, radius)

    def __str__(self) -> str:
        return (
            f"GeoPoint(latitude={self.lat_deg:g} {Latitude.SYMBOL}, "
            f"longitude={self.lon_deg:g} {Longitude.SYMBOL}, height={self.height:g} m)"
        )
