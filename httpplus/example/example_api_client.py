"""
Example API client demonstrating how to use httpplus.

Usage:
    ```python
    async with ExampleApiClient("https://api.example.com") as api:
        result = await api.get_users()
        result.on_success(
            lambda users: print(f"Got {len(users)} users")
        ).on_error(
            lambda error: print(f"Error: {error.message}")
        )
    ```
"""

from typing import List, Optional

from httpplus.core.http import ApiClient, NetworkResult, RetryConfig, create_http_client
from httpplus.providers.platform import PlatformProvider
from httpplus.pydantic_models.users.create_user_request_model import CreateUserRequestModel
from httpplus.pydantic_models.users.update_user_request_model import UpdateUserRequestModel
from httpplus.pydantic_models.users.user_model import User


class ExampleApiClient(ApiClient):
    """
    CRUD client for a ``/users`` resource.

    Args:
        base_url: Base URL of the API
        enable_logging: Log every request and response line
        retry: Retry policy for server errors (defaults to the environment)
        platform: Platform provider (defaults to the process-wide provider)
    """

    def __init__(
        self,
        base_url: str,
        enable_logging: bool = True,
        retry: Optional[RetryConfig] = None,
        platform: Optional[PlatformProvider] = None
    ):
        super().__init__(
            create_http_client(
                base_url=base_url,
                enable_logging=enable_logging,
                retry=retry,
                platform=platform
            )
        )
        # The client was created here, so this instance closes it
        self._owns_client = True

    async def get_users(self) -> NetworkResult[List[User]]:
        return await self.get("/users", List[User])

    async def get_user_by_id(self, user_id: int) -> NetworkResult[User]:
        return await self.get(f"/users/{user_id}", User)

    async def create_user(self, user: CreateUserRequestModel) -> NetworkResult[User]:
        return await self.post("/users", User, body=user)

    async def update_user(self, user_id: int, user: UpdateUserRequestModel) -> NetworkResult[User]:
        return await self.put(f"/users/{user_id}", User, body=user.model_dump(exclude_none=True))

    async def delete_user(self, user_id: int) -> NetworkResult[None]:
        return await self.delete(f"/users/{user_id}")
