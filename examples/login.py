"""
Login Example - Credentials from .env / environment, print the session token.

Set MAIL_TEL and PASSWORD (or put them in a .env file) before running.
"""

import asyncio

from niconico_auth import login
from niconico_auth.adapters import EnvCredentialAdapter
from niconico_auth.logging_config import setup_logging


async def main():
    setup_logging()

    credentials = EnvCredentialAdapter(use_dotenv=True).load()
    print(f"Credentials loaded: {credentials}")

    user_session = await login(credentials)

    print(f"Session: {user_session}")
    print(user_session.expose())


if __name__ == "__main__":
    asyncio.run(main())
