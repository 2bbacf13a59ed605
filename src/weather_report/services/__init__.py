"""
Shared utilities used by the data sources.

- http.py  - ``requests.Session`` with default timeout and User-Agent
"""
