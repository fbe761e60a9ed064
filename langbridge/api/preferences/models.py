from pydantic import BaseModel


class ThemePreference(BaseModel):
    theme: str
