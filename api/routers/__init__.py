"""
API Routers - HTTP endpoint handlers

- encode: Base64-encode a string through the sidecar
- health: Readiness of the sidecar executable
"""
