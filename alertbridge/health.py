import logging
from typing import Callable, List, NamedTuple, Sequence, Tuple

logger = logging.getLogger(__name__)


class ReadinessCheck(NamedTuple):
    name: str
    probe: Callable[[], bool]


class CheckResult(NamedTuple):
    name: str
    ok: bool


def run_checks(checks: Sequence[ReadinessCheck]) -> List[CheckResult]:
    results = []
    for check in checks:
        try:
            ok = bool(check.probe())
        except Exception as exc:
            # Falha inesperada na sonda conta como componente fora do ar
            logger.warning(f"Checagem '{check.name}' falhou: {exc}")
            ok = False
        results.append(CheckResult(check.name, ok))
    return results


def render_readiness(results: Sequence[CheckResult], verbose: bool = False) -> Tuple[str, int]:
    """Converte os resultados em (corpo, status HTTP).

    verbose: uma linha '[+] nome' / '[-] nome' por componente, 200 ou 503.
    Sem verbose: corpo vazio, 204 ou 503.
    """
    all_ok = all(result.ok for result in results)
    if not verbose:
        return "", 204 if all_ok else 503

    lines = [f"[{'+' if result.ok else '-'}] {result.name}" for result in results]
    return "\n".join(lines) + "\n", 200 if all_ok else 503
