"""
Version information for the LTA DataMall client.

Centralized version management for the client library, including the
upstream API provider details used to build default request settings.
"""

# Core library information
__version__ = "0.4.0"
__version_info__ = (0, 4, 0)
__app_name__ = "lta-datamall"
__description__ = "Typed client for the LTA DataMall transport open-data API"
__python_version_required__ = "3.9+"

# API information
__api_provider__ = "LTA DataMall"
__api_base_url__ = "http://datamall2.mytransport.sg/ltaodataservice"
__api_key_header__ = "AccountKey"
__api_resources__ = [
    "Bus arrivals, services, routes and stops",
    "Taxi availability and taxi stands",
    "Train service alerts",
    "Passenger volume by bus stop and train station",
    "Car park availability, travel times, traffic lights, road works, images, incidents",
    "Bicycle parking",
]

# License information
__license__ = "GPL v3"


def get_version_string() -> str:
    """Get formatted version string."""
    return f"{__app_name__} v{__version__}"


def get_user_agent() -> str:
    """Get the default User-Agent sent with every request."""
    return f"{__app_name__}/{__version__}"


def get_api_info() -> dict:
    """Get upstream API information."""
    return {
        "version": __version__,
        "provider": __api_provider__,
        "base_url": __api_base_url__,
        "key_header": __api_key_header__,
        "resources": __api_resources__,
        "api_key_required": True,
    }
