from typing import Sequence


class ModelBase:
    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({str(self)})"


def fmt_selector(seq: Sequence) -> str:
    res = ""
    if seq:
        res += str(seq[0])
        for elm in seq[1:]:
            res += f", {elm}"
    return res
