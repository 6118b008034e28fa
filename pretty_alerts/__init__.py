"""Proxy de alertas Grafana/Alertmanager -> Discord com mensagens formatadas.

Este pacote contém:
- constants: variáveis de ambiente e mapas de configuração
- utils: logging, truncamento e helpers de formatação
- models: modelos pydantic de entrada (alertas) e saída (mensagens do Discord)
- detection: títulos e cores por status/severidade
- links: deep links do Grafana (lista de alertas, silence)
- formatters: transformação de lote de alertas em mensagens do Discord
- services: entrega ao webhook do Discord
- metrics: reporter de métricas injetável (Prometheus ou no-op)
- controller: criação do Flask app e endpoints
"""
