"""
Base URL resolution for outbound API calls.
"""

from typing import Any, Mapping

from common.utils.exceptions import ConfigurationException


def get_base_url(params: Mapping[str, Any], environment: Mapping[str, Any]) -> str:
    """
    Resolve the API base URL for a job.

    Prefers the `address` job parameter, falling back to the ADDRESS
    environment value. One trailing slash is removed.

    Args:
        params: Job input parameters
        environment: Execution context environment

    Returns:
        Base URL without trailing slash

    Raises:
        ConfigurationException: If neither source provides a URL
    """
    address = (params or {}).get("address") or (environment or {}).get("ADDRESS")

    if not address:
        raise ConfigurationException(
            "No URL specified. Provide address parameter or ADDRESS environment variable"
        )

    return address[:-1] if address.endswith("/") else address
