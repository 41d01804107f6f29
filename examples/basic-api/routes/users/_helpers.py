"""Never mounted: files starting with an underscore are private."""


def normalize(name: str) -> str:
    return name.strip().lower()
