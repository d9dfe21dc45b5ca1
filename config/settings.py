from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
    )

    # Network selector: "local" (dfx replica) or "ic" (mainnet boundary nodes)
    DFX_NETWORK: str = "ic"

    # Hosts (defaults match `dfx start` for local dev)
    LOCAL_HOST: str = "http://localhost:4943"
    IC_HOST: str = "https://icp-api.io"

    # Ledger canister ids deployed on the local replica, empty when not deployed
    LOCAL_ICP_CANISTER_ID: str = ""
    LOCAL_CKBTC_CANISTER_ID: str = ""

    # App
    APP_NAME: str = "Token Balance Service"
    DEBUG: bool = False


settings = Settings()
