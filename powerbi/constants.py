from framework.configuration.core import DEFAULT_BASE_API_URL

BASE_URL: str = DEFAULT_BASE_API_URL
"""The Power BI REST API root used when no other address is configured"""

POWERBI_DEFAULT_SCOPE: str = "https://analysis.windows.net/powerbi/api/.default"
"""The default scope to all PowerBI resource services (API)"""
