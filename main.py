import asyncio
import sys
from pathlib import Path

from httpplus import network_flow, result_flow, setup_logging
from httpplus.core.config import BASE_URL, LOG_LEVEL, validate_config
from httpplus.example import ExampleApiClient
from httpplus.pydantic_models.users.create_user_request_model import CreateUserRequestModel

# Configure centralized logging
logger = setup_logging(
    log_level=LOG_LEVEL,
    log_file=Path("httpplus.log")
)


async def run_demo(base_url: str) -> None:
    """Walk through the example client against ``base_url``."""
    logger.info(f"Running httpplus demo against {base_url}")

    async with ExampleApiClient(base_url) as api:
        # Plain call + combinators
        users = await api.get_users()
        users.on_success(
            lambda data: logger.info(f"Got {len(data)} users")
        ).on_error(
            lambda error: logger.error(f"Listing users failed: {error}")
        )

        # Progress stream over a facade call
        async for state in result_flow(lambda: api.get_user_by_id(1)):
            state.on_loading(
                lambda: logger.info("Loading user 1...")
            ).on_success(
                lambda user: logger.info(f"User 1 is {user.name} <{user.email}>")
            ).on_error(
                lambda error: logger.error(f"Loading user 1 failed: {error}")
            )

        created = await api.create_user(CreateUserRequestModel(name="A", email="a@x.com"))
        created_id = created.map(lambda user: user.id).get_or_null()
        logger.info(f"Created user id: {created_id}")

        # Progress stream over an arbitrary coroutine
        async for state in network_flow(lambda: asyncio.sleep(0.1, result="done")):
            logger.info(f"Background step: {state!r}")


def main() -> int:
    try:
        validate_config()
    except ValueError as e:
        logger.error(f"Configuration error: {e}")
        return 1

    if not BASE_URL:
        logger.error("HTTPPLUS_BASE_URL is not set. Please set it in your environment or .env file.")
        return 1

    asyncio.run(run_demo(BASE_URL))
    return 0


if __name__ == "__main__":
    sys.exit(main())
