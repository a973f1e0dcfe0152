from bs4 import BeautifulSoup


def table_rows(document: str) -> list[tuple[str, str, str]]:
    """Data rows of the first table of a rendered report, header excluded"""
    soup = BeautifulSoup(document, "html.parser")
    rows = []
    for tr in soup.find("table").find_all("tr"):
        cells = tr.find_all("td")
        if not cells:
            continue
        day, month, year = (cell.get_text() for cell in cells)
        rows.append((day, month, year))
    return rows
