"""
Learning Check package.

Conversational end-of-chapter assessment backed by a Tavus AI avatar:
the client-side session flow plus the HTTP boundary that brokers
conversation sessions.
"""

__version__ = "0.1.0"
