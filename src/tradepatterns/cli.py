from contextlib import contextmanager
from typing import List, Optional
import typer
from pydantic import ValidationError

from tradepatterns.app import run_order, run_prices
from tradepatterns.data.symbols import SymbolRegistry
from tradepatterns.settings import Settings


app = typer.Typer(help="tradepatterns CLI")


@contextmanager
def _config_errors():
    # 설정 검증 실패(예: 알 수 없는 price.source)는 traceback 대신 사용법 오류로
    try:
        yield
    except ValidationError as e:
        problems = "; ".join(
            f"{'.'.join(str(p) for p in err['loc'])}: {err['msg']}" for err in e.errors()
        )
        raise typer.BadParameter(problems, param_hint="--config")


@app.command()
def order(
    steps: int = typer.Option(2, help="advance 호출 횟수"),
    symbol: Optional[str] = typer.Option(None, help="예: KRW-BTC"),
    config: str = "configs/dev.yaml",
):
    with _config_errors():
        o = run_order(config, steps=steps, symbol=symbol, echo=typer.echo)
    typer.echo(f"final state: {o.state.name}")


@app.command()
def price(
    symbols: Optional[List[str]] = typer.Argument(None, help="비우면 설정 파일의 symbols 사용"),
    repeat: int = typer.Option(2, help="같은 심볼 반복 조회 횟수"),
    config: str = "configs/dev.yaml",
):
    with _config_errors():
        proxy, results = run_prices(config, symbols or [], repeat=repeat)
    for sym, px in results:
        typer.echo(f"{sym} {px:.2f}")
    typer.echo(f"hits={proxy.hits} misses={proxy.misses}")


@app.command()
def symbols(config: str = "configs/dev.yaml"):
    with _config_errors():
        s = Settings.load(config)
    registry = SymbolRegistry()
    for sym in registry.intern_all(s.symbols):
        typer.echo(f"{sym.code} base={sym.base} quote={sym.quote or '-'}")


if __name__ == "__main__":
    app()
