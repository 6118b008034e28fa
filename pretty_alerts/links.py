from typing import Dict, Optional

from .constants import ALERTING_LIST_PATH, SILENCE_PATH
from .utils import strip_trailing_slash


def build_alerting_url(external_url: Optional[str]) -> Optional[str]:
    """Link para a lista de regras de alerta do Grafana, ou None sem externalURL."""
    if not external_url:
        return None
    return strip_trailing_slash(external_url) + ALERTING_LIST_PATH


def build_silence_url(external_url: str, labels: Dict[str, str]) -> str:
    """
    Monta o link que abre o formulário de silence do Grafana pré-preenchido
    com um matcher por label.

    Labels são percorridas em ordem de chave para que o link seja estável.

    Exemplos:
        ('https://g.example.com/', {'alertname': 'X'}) ->
            'https://g.example.com/alerting/silence/new?alertmanager=grafana&matcher=alertname%3DX'
    """
    silence_url = strip_trailing_slash(external_url) + SILENCE_PATH
    for key in sorted(labels):
        value = labels[key].replace(" ", "+")
        silence_url += f"&matcher={key}%3D{value}"
    if "orgId=" in external_url:
        silence_url += "&orgId=1"
    return silence_url
