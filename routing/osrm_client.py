#Purpose: The OSRM "adapter/client".
#Sole responsibility: talk to OSRM via HTTP and return normalized outputs.
#Encapsulates OSRM-specific details:
#coordinate formatting (lon,lat)
#URL construction (/route)
#timeouts and error handling
#parsing response JSON into our internal shape (lat,lon polyline, metres, seconds)
#It should not contain fallback rules or rounding for display.


from dotenv import load_dotenv
import math
import os
from typing import List, Tuple, Dict, Any, Optional
import requests

# Read OSRM settings from environment
# Example in .env:
# BASE_URL=http://router.project-osrm.org
# OSRM_PROFILE=foot
# OSRM_TIMEOUT=5
load_dotenv()
DEFAULT_BASE_URL = "https://router.project-osrm.org"
BASE_URL = os.getenv("BASE_URL") or DEFAULT_BASE_URL
PROFILE = os.getenv("OSRM_PROFILE", "foot")
TIMEOUT = float(os.getenv("OSRM_TIMEOUT", "5"))

# Internal coordinate type: (lat, lon)
LatLon = Tuple[float, float]

class OSRMError(Exception):
    """Raised when OSRM answers but the answer is not a usable route."""
    pass

class OSRMClient:
    """
    OSRM Adapter / Client

    Sole responsibility:
    - Talk to OSRM via HTTP
    - Convert internal (lat, lon) → OSRM (lon,lat) and back
    - Return normalized outputs

    """
    def __init__(self, profile: Optional[str] = None, timeout: Optional[float] = None,
                 base_url: Optional[str] = None, session: Optional[requests.Session] = None):
        self.base_url = (base_url or BASE_URL).rstrip("/")
        self.timeout = timeout if timeout is not None else TIMEOUT #seconds to wait for OSRM before giving up
        self.profile = profile or PROFILE #the mode of transportation (foot, driving, cycling)
        self.session = session

        if self.timeout <= 0:
            raise ValueError("OSRM timeout must be > 0")

    #----------------
    # Internal helpers
    #----------------
    def format_coordinates(self, coords: List[LatLon]) -> str:
        """Convert list of (lat, lon) to OSRM format 'lon,lat;lon,lat;...'"""
        return ';'.join([f"{lon},{lat}" for lat, lon in coords])

    def route_url(self, coordinates: List[LatLon]) -> str:
        return f"{self.base_url}/route/v1/{self.profile}/{self.format_coordinates(coordinates)}"

    def _get(self, url: str, params: Dict[str, Any]) -> requests.Response:
        getter = self.session.get if self.session is not None else requests.get
        return getter(url, params=params, timeout=self.timeout)

    #----------------
    # Public methods
    #----------------
    def compute_route(self, coordinates: List[LatLon]) -> Dict[str, Any]:
        """
        calls the OSRM /route endpoint with the given coordinates and
        returns the first candidate route with its full geometry

        Returns:
            {
                "coordinates": [(lat, lon), ...],
                "distance": float, # in meters
                "duration": float, # in seconds
            }

        Raises:
            requests.RequestException: transport failure, timeout or HTTP error status
            OSRMError: non-Ok code, no routes, or a response of the wrong shape
        """
        if len(coordinates) < 2:
            raise ValueError("At least two coordinates are required to compute a route.")

        response = self._get(
            self.route_url(coordinates),
            params={
                "overview": "full",
                "geometries": "geojson",
            },
        )
        response.raise_for_status()

        try:
            data = response.json()
        except ValueError as e:
            raise OSRMError(f"OSRM returned invalid JSON: {e}") from e

        #validating OSRM response
        if not isinstance(data, dict) or data.get("code") != "Ok":
            message = data.get("message", "Unknown error") if isinstance(data, dict) else "Unknown error"
            raise OSRMError(f"OSRM error: {message}")

        routes = data.get("routes") or []
        if not routes:
            raise OSRMError("OSRM returned no routes")

        try:
            route = routes[0] #take the first route (OSRM may return alternatives)
            #OSRM geojson geometry is [lon, lat]; swap to our (lat, lon)
            polyline = [(float(lat), float(lon)) for lon, lat in route["geometry"]["coordinates"]]
            distance = float(route["distance"])
            duration = float(route["duration"])
        except (KeyError, IndexError, TypeError, ValueError) as e:
            raise OSRMError(f"Malformed OSRM route: {e!r}") from e

        if not polyline:
            raise OSRMError("OSRM route has an empty geometry")

        #NaN/Infinity parse as floats; reject them along with negative totals
        if not all(math.isfinite(v) and v >= 0 for v in (distance, duration)):
            raise OSRMError(f"OSRM route has invalid totals: distance={distance}, duration={duration}")
        if not all(math.isfinite(lat) and math.isfinite(lon) for lat, lon in polyline):
            raise OSRMError("OSRM route has non-finite coordinates")

        #Normalize output to internal format
        return {
            "coordinates": polyline,
            "distance": distance,
            "duration": duration,
        }
