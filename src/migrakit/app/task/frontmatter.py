from typing import Tuple
import yaml

DELIMITER = "---"


def parse_frontmatter(content: str) -> Tuple[dict, str]:
    """Separa el frontmatter YAML del cuerpo de un documento markdown.

    Un bloque sin delimitador de cierre se lee como YAML hasta el final
    del documento, con cuerpo vacío.

    Returns:
        tuple[dict, str]: Los datos del frontmatter y el cuerpo restante.
            Un documento sin frontmatter devuelve un diccionario vacío.

    Raises:
        ValueError: Si el frontmatter no es un mapeo.
        yaml.YAMLError: Si el YAML está mal formado.
    """
    lines = content.lstrip("\ufeff").splitlines(keepends=True)
    if not lines or lines[0].rstrip() != DELIMITER:
        return {}, content
    close_index = len(lines)
    for index, line in enumerate(lines[1:], start=1):
        if line.rstrip() == DELIMITER:
            close_index = index
            break
    data = yaml.safe_load("".join(lines[1:close_index]))
    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ValueError("Frontmatter must be a mapping")
    return data, "".join(lines[close_index + 1:])
