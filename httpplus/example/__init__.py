from httpplus.example.example_api_client import ExampleApiClient

__all__ = ["ExampleApiClient"]
