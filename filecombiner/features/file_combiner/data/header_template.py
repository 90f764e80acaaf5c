class HeaderTemplate:
    """
    Renders per-file header lines.

    Substitution is literal find/replace, applied in the order
    {path}, {name}, {ext}, {index}. Every occurrence is replaced and
    unknown braces are left untouched (no str.format evaluation).
    """

    PLACEHOLDERS = ("{path}", "{name}", "{ext}", "{index}")

    def __init__(self, template: str):
        self.template = template or ""

    def render(self, path: str, name: str, ext: str, index: int) -> str:
        return (
            self.template
            .replace("{path}", path)
            .replace("{name}", name)
            .replace("{ext}", ext)
            .replace("{index}", str(index))
        )
