"""
Network Layer.

Holds the aiohttp-based downloader. Import `agent_os_installer.net.fetcher`
only after `ensure_http_client()` has passed.
"""
