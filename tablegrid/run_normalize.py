# -*- coding: utf-8 -*-
"""
테이블 정규화 CLI

HWPX 또는 XHTML 파일의 모든 테이블에서 빈 위치를 채우고 rowspan/colspan을
다시 계산합니다.

사용법:
    # 구조만 출력
    python -m tablegrid.run_normalize table.hwpx

    # 정규화 결과 저장
    python -m tablegrid.run_normalize -o output.hwpx table.hwpx

    # YAML 설정 사용
    python -m tablegrid.run_normalize -o output.xhtml --config tablegrid_config.yaml table.xhtml
"""

import argparse
import sys
from pathlib import Path
from typing import List, Optional

from .config import load_config, setup_logging
from .markup.document import TableDocument
from .markup.parser import TableParser
from .normalizer import TableNormalizer, print_table_structure


def normalize_file(
    input_path: str,
    output_path: Optional[str] = None,
    config_path: Optional[str] = None,
    mark_new: bool = False,
    show: bool = True,
) -> TableDocument:
    """파일의 모든 테이블 정규화"""
    config = load_config(config_path)
    if mark_new:
        config.grid.mark_cells_as_new = True
    setup_logging(config.log_level)

    doc = TableDocument.load(input_path, TableParser(default_section=config.grid.default_section))
    normalizer = TableNormalizer(config)

    for i, table in enumerate(doc.tables):
        result = normalizer.normalize(table, write=output_path is not None)
        if show:
            print(f"\n[테이블 {i + 1}] ({table.kind})")
            print("-" * 40)
            print_table_structure(result)

    if output_path:
        doc.save(output_path)
        print(f"\n[OK] 저장 완료: {output_path}")

    return doc


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        description="테이블 정규화 CLI",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
예시:
  # 구조만 출력
  python -m tablegrid.run_normalize table.hwpx

  # 정규화 결과 저장
  python -m tablegrid.run_normalize -o output.hwpx table.hwpx
"""
    )

    parser.add_argument("file", help="HWPX 또는 XHTML 파일")
    parser.add_argument("-o", "--output", help="출력 파일 경로 (없으면 구조만 출력)")
    parser.add_argument("--config", help="YAML 설정 파일 경로")
    parser.add_argument("--mark-new", action="store_true", help="기존 셀도 신규 셀로 표시")
    parser.add_argument("--quiet", action="store_true", help="구조 출력 생략")

    args = parser.parse_args(argv)

    if not Path(args.file).exists():
        print(f"[ERROR] 파일을 찾을 수 없습니다: {args.file}", file=sys.stderr)
        return 1

    try:
        normalize_file(
            args.file,
            output_path=args.output,
            config_path=args.config,
            mark_new=args.mark_new,
            show=not args.quiet,
        )
    except ValueError as e:
        print(f"[ERROR] {e}", file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
