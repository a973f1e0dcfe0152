from dataclasses import dataclass


@dataclass
class Context:
    title: str = "Velikonoce"
    charset: str = "utf-8"
