from __future__ import annotations
import logging
import random
import click
import yaml
from pathlib import Path
from csv_record_writer.config import WriterConfig
from csv_record_writer.errors import PreconditionError
from csv_record_writer.models import MODELS
from csv_record_writer.sample import make_persons, make_samples, make_students
from csv_record_writer.schema import resolve
from csv_record_writer.writers import discover as discover_writers, get_writer


def _load_config(config_path: str) -> dict:
    p = Path(config_path)
    if p.exists():
        return yaml.safe_load(p.read_text(encoding="utf-8")) or {}
    return {}


@click.group()
@click.option("-c", "--config", "config_path", default="config.yaml", help="配置文件路径")
@click.option("-v", "--verbose", is_flag=True, help="输出 INFO 日志")
@click.pass_context
def cli(ctx, config_path, verbose):
    """按字段声明把记录批量导出为 CSV"""
    if verbose:
        logging.basicConfig(
            level=logging.INFO,
            format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        )
    ctx.ensure_object(dict)
    ctx.obj["config"] = _load_config(config_path)


@cli.command()
@click.option("-o", "--output-dir", default=None, help="输出目录")
@click.option("--persons", default=None, type=int, help="Person 条数")
@click.option("--students", default=None, type=int, help="Student 条数")
@click.option("--samples", default=None, type=int, help="Sample 条数")
@click.option("--seed", default=None, type=int, help="随机种子 (固定种子可复现)")
@click.option("--encoding", default=None, help="文件编码")
@click.pass_context
def demo(ctx, output_dir, persons, students, samples, seed, encoding):
    """生成示例数据并写出 persons.csv / students.csv / samples.csv"""
    cfg = ctx.obj["config"]

    output_path = Path(output_dir or cfg.get("output_dir", "."))
    persons = persons if persons is not None else cfg.get("persons", 100)
    students = students if students is not None else cfg.get("students", 100)
    samples = samples if samples is not None else cfg.get("samples", 5)
    seed = seed if seed is not None else cfg.get("seed")

    writer_cfg = WriterConfig.from_dict(cfg.get("writer"))
    if encoding:
        writer_cfg.encoding = encoding

    rng = random.Random(seed)
    batches = [
        ("persons.csv", make_persons(persons, rng)),
        ("students.csv", make_students(students, rng)),
        ("samples.csv", make_samples(samples, rng)),
    ]

    discover_writers()
    writer = get_writer("csv", config=writer_cfg)

    for name, records in batches:
        fp = output_path / name
        click.echo(f"📤 写出 {fp} ({len(records)} 条)...")
        try:
            writer.write_to_file(records, fp)
        except PreconditionError as e:
            click.echo(f"[ERROR] {e}")

    click.echo(f"✅ 完成! 输出目录: {output_path}")


@cli.command()
@click.argument("model", type=click.Choice(sorted(MODELS)))
def schema(model):
    """查看示例模型的导出字段顺序"""
    for fd in resolve(MODELS[model]):
        click.echo(f"{fd.order:>3}  {fd.label:<16} {fd.name}")


def main():
    cli()


if __name__ == "__main__":
    main()
