from uuid import NAMESPACE_OID, UUID

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # Namespace for name-based (uuid3 / uuid5) generation
    UUID_NAMESPACE: UUID = NAMESPACE_OID

    class Config:
        env_file = ".env"


settings = Settings()
