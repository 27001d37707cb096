"""Expressões regulares fixas usadas pelos validadores."""

EMAIL_ADDRESS = (
    r"^([a-z0-9_\-])([a-z0-9_\-\.]*)@"
    r"(\[((25[0-5]|2[0-4][0-9]|1[0-9][0-9]|[1-9][0-9]|[0-9])\.){3}|((([a-z0-9\-]+)\.)+))"
    r"([a-z]{2,}|(25[0-5]|2[0-4][0-9]|1[0-9][0-9]|[1-9][0-9]|[0-9])\])$"
)

_BASE64_CONTENT = (
    r"(?P<content>(?:[A-Za-z0-9+/]{4})*"
    r"(?:[A-Za-z0-9+/]{2}==|[A-Za-z0-9+/]{3}=|[A-Za-z0-9+/]{4}))"
)

# Conteúdo Base64 puro (grupo "content")
BASE64_CONTENT = rf"^{_BASE64_CONTENT}$"

# Data URI: data:image/png;base64,<conteúdo>
BASE64_DATAURI = rf"^data:(?P<type>.+?/(?P<extension>.+?));(?P<base>.+),{_BASE64_CONTENT}$"

# DDD + 9 + 8 dígitos (aplicado sobre o valor já normalizado)
MOBILE_NUMBER = r"^[0-9]{2}9[0-9]{8}$"

# CEP com ou sem hífen (aplicado sobre o valor bruto)
ZIP_CODE = r"^[0-9]{5}-?[0-9]{3}$"
