"""
Focus Sessions - Browser session tracking

Modules:
- urls: Internal page addresses
- session: Sessions, the NullSession placeholder and the session manager
- config: Environment-backed configuration

Logging is left alone until the application calls
focus_sessions.logging_config.configure_logging().
"""

__version__ = "1.0.0"
