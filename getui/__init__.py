"""Client library for the Getui push notification REST API: configuration, authentication, request objects and push, user and statistics calls."""

__version__ = "0.1.0"

__all__ = [
    "api_result",
    "cli",
    "client",
    "config",
    "dto",
    "errors",
    "push_api",
    "statistic_api",
    "token_manager",
    "user_api",
]