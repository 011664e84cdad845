"""
loadburst - HTTP Burst Load Driver
===================================

Fires a burst of concurrent HTTP GET requests at a local server and
reports how long the whole burst took:
- driver.py: Load driver CLI (targets http://localhost:4444)
- target.py: Dummy HTTP target service (port 4444)
- models.py: Pydantic run records
"""

__version__ = "1.0.0"
