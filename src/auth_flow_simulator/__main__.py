"""
CLI entry point for the Auth Flow Simulator MCP server
"""

if __name__ == "__main__":
    from . import http_main, main
    from .config import settings

    if settings.transport == "http":
        http_main(host=settings.http_host, port=settings.http_port)
    else:
        main()
