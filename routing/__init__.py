#Marks routing as a package.
#Re-exports the public API (OSRMClient, RouteResolver, route models, policy)
#so other modules import from routing without knowing internal file names.
#No business logic.

from .osrm_client import OSRMClient, OSRMError
from .geometry import haversine_m
from .models import NetworkRoute, EstimatedRoute, Route, RouteKind, LineStyle
from .policy import RoutingPolicy, default_routing_policy
from .route_service import RouteResolver

__all__ = [
           "OSRMClient",
           "OSRMError",
             "haversine_m",
             "NetworkRoute",
             "EstimatedRoute",
             "Route",
             "RouteKind",
             "LineStyle",
             "RoutingPolicy",
             "default_routing_policy",
             "RouteResolver",
             ]
