from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # Enforce the [0, 100] LTV bound in has_pmi. Off by default so that
    # under-water refinances (loan larger than the home value) still compute.
    STRICT_LTV_RANGE: bool = False
    COMPARISON_LOAN_COUNT: int = 2

    model_config = {
        "env_prefix": "MORTGAGE_CALC_",
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore",
    }


settings = Settings()
