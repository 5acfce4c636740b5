import re

from pydantic import BaseModel

_PLACEHOLDER = re.compile(r"\{\{\s*(\w+)\s*\}\}")


class Prompt(BaseModel):
    name: str
    version: str
    description: str
    inputs: dict[str, str]
    template: str

    class Config:
        extra = "forbid"
        frozen = True

    def render(self, **values: object) -> str:
        """Substitute `{{ name }}` placeholders.

        Raises:
            ValueError: If a declared input is missing or an undeclared
                value is passed.
        """
        missing = set(self.inputs) - set(values)
        if missing:
            raise ValueError(
                f"Prompt '{self.name}' missing inputs: {', '.join(sorted(missing))}"
            )
        unknown = set(values) - set(self.inputs)
        if unknown:
            raise ValueError(
                f"Prompt '{self.name}' got unknown inputs: {', '.join(sorted(unknown))}"
            )

        return _PLACEHOLDER.sub(lambda m: str(values[m.group(1)]), self.template)
