from fastapi import Request
from supabase import create_client, Client
from saafi.config.settings import Settings


class SupabaseClient:
    _client: Client = None

    @classmethod
    def get_client(cls, settings: Settings) -> Client:
        if cls._client is None:
            cls._client = create_client(settings.supabase_url, settings.supabase_key)
        return cls._client

    @classmethod
    def reset_client(cls):
        cls._client = None


def get_supabase(request: Request) -> Client:
    return SupabaseClient.get_client(request.app.state.settings)
