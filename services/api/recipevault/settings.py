from pydantic_settings import BaseSettings, SettingsConfigDict

from .parsing import ParseOptions


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    app_name: str = "RecipeVault Parser API"
    log_level: str = "INFO"

    # Requests
    rate_limit: str = "60/minute"
    max_text_length: int = 100_000

    # Parse defaults, used when a request carries no options
    parse_extract_nutrition: bool = True
    parse_detect_dietary_restrictions: bool = True
    parse_categorize_recipe: bool = True
    parse_normalize_ingredients: bool = True
    parse_validate_instructions: bool = True

    # CORS
    cors_origins: list[str] = [
        "http://localhost:3000",
        "http://127.0.0.1:3000",
        "http://localhost",
        "http://127.0.0.1",
    ]

    def default_parse_options(self) -> ParseOptions:
        return ParseOptions(
            extract_nutrition=self.parse_extract_nutrition,
            detect_dietary_restrictions=self.parse_detect_dietary_restrictions,
            categorize_recipe=self.parse_categorize_recipe,
            normalize_ingredients=self.parse_normalize_ingredients,
            validate_instructions=self.parse_validate_instructions,
        )


settings = Settings()
