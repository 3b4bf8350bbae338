"""Prompt Templates (pt-BR): fixed instructions sent to Gemini.

Invariants:
    - Templates are pure string builders, no IO
    - The series prompt asks for exactly the Series shape build_synthetic_series emits
"""

from datetime import date, datetime

from painel.core.synthetic_series import INFORMALITY_NAME, UNEMPLOYMENT_NAME

DEFAULT_EXPLAIN_TASK = "Explique os dados de forma acessível e objetiva."

QUOTA_FALLBACK_TEXT = (
    "Nota: atingimos o limite de uso da API no momento. Exibindo explicação "
    "curta baseada nos dados recentes: a tendência observada reflete "
    "oscilações típicas do mercado de trabalho, com efeitos combinados de "
    "ciclo econômico, políticas públicas e dinâmicas setoriais."
)


def build_explain_prompt(prompt: str | None, context: str | None) -> str:
    """Instruction for the free-text explanation endpoint."""
    return (
        "Você é um assistente que explica dados socioeconômicos do Brasil "
        "de forma clara e concisa.\n\n"
        f"Contexto:\n{context or ''}\n\n"
        f"Tarefa:\n{prompt or DEFAULT_EXPLAIN_TASK}"
    )


def build_series_prompt(months: int, end: date | datetime) -> str:
    """Instruction demanding strict JSON series up to `end`'s month."""
    period_end = f"{end.year:04d}-{end.month:02d}"
    return f"""Gere séries temporais mensais SINTÉTICAS e verossímeis (não precisa ser real) para o Brasil em formato JSON ESTRITO.

Regras IMPORTANTES:
- Saída deve ser APENAS JSON, sem markdown, sem crases, sem comentários.
- Use aspas duplas em todas as chaves e strings.
- Não inclua texto fora do objeto JSON.

Parâmetros:
- Período: últimos {months} meses até {period_end} (formato YYYY-MM).
- Variáveis: "{INFORMALITY_NAME}" e "{UNEMPLOYMENT_NAME}".
- Valores em porcentagem (número, use ponto decimal).

Formato EXATO:
{{
  "series": [
    {{
      "name": "{INFORMALITY_NAME}",
      "results": [ {{ "series": {{ "YYYY-MM": numero, ... }} }} ]
    }},
    {{
      "name": "{UNEMPLOYMENT_NAME}",
      "results": [ {{ "series": {{ "YYYY-MM": numero, ... }} }} ]
    }}
  ]
}}"""
