from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    model_config = {"env_file": ".env", "env_file_encoding": "utf-8", "env_prefix": "DEBT_LEDGER_"}

    # Amortization policy
    # A fixed-payment schedule that has not amortized in 50 years counts as never paying off
    max_periods: int = 600

    # Portfolio chart
    chart_horizon_cap: int = 120
    fine_step_limit: int = 24  # Sample every period up to here
    medium_step_limit: int = 60  # Every 3rd period up to here, every 6th beyond

    # App
    api_base_url: str = "http://localhost:8000"
    debug: bool = False
    log_level: str = "INFO"


settings = Settings()
