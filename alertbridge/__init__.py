"""Pacote do bridge Alertmanager -> Discord.

Este pacote contém:
- constants: textos, cores e valores padrão
- config: leitura das variáveis de ambiente (Settings)
- errors: hierarquia de exceções
- models: validação do payload recebido do Alertmanager
- grouping: agrupamento dos alertas por status e severidade
- formatters: montagem das mensagens/embeds do Discord
- services: integração com o webhook do Discord
- health: checagens de prontidão (/readyz)
- controller: criação do Flask app e endpoints
"""

__version__ = "0.3.0"
