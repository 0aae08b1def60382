# -*- coding: utf-8 -*-
"""
테이블 문서 입출력

- .hwpx: ZIP 안의 Contents/section*.xml에서 테이블 로드, 저장 시 section XML 재생성
- .xhtml/.html/.htm/.xml: ElementTree로 파싱 (well-formed XML이어야 함)

사용 예:
    doc = TableDocument.load("input.hwpx")
    for table in doc.tables:
        ...
    doc.save("output.hwpx")
"""

import logging
import zipfile
import xml.etree.ElementTree as ET
from io import BytesIO
from pathlib import Path
from typing import Dict, List, Optional, Union

from .parser import ParsedTable, TableParser


logger = logging.getLogger(__name__)

HWPX_SUFFIXES = ('.hwpx',)
XML_SUFFIXES = ('.xhtml', '.html', '.htm', '.xml')


class TableDocument:
    """테이블을 포함한 문서"""

    def __init__(
        self,
        path: Path,
        roots: Dict[str, ET.Element],
        tables: List[ParsedTable],
        entries: Optional[Dict[str, bytes]] = None,
    ):
        """
        Args:
            path: 원본 파일 경로
            roots: 파싱된 XML 루트 (HWPX는 section 파일명별, XML은 '' 하나)
            tables: 문서 순서대로 파싱된 테이블
            entries: HWPX ZIP 항목 원본 (XML 문서는 None)
        """
        self.path = path
        self.roots = roots
        self.tables = tables
        self.entries = entries

    @property
    def is_hwpx(self) -> bool:
        return self.entries is not None

    @classmethod
    def load(cls, path: Union[str, Path], parser: Optional[TableParser] = None) -> "TableDocument":
        """파일에서 문서 로드"""
        path = Path(path)
        parser = parser or TableParser()
        suffix = path.suffix.lower()

        if suffix in HWPX_SUFFIXES:
            return cls._load_hwpx(path, parser)
        if suffix in XML_SUFFIXES:
            root = ET.parse(path).getroot()
            tables = parser.parse_tables(root)
            logger.info(f"{path.name}: 테이블 {len(tables)}개")
            return cls(path, {'': root}, tables)

        raise ValueError(f"지원하지 않는 파일 형식입니다: {path.suffix}")

    @classmethod
    def _load_hwpx(cls, path: Path, parser: TableParser) -> "TableDocument":
        entries: Dict[str, bytes] = {}
        roots: Dict[str, ET.Element] = {}
        tables: List[ParsedTable] = []

        with zipfile.ZipFile(path, 'r') as zf:
            for name in zf.namelist():
                entries[name] = zf.read(name)

        section_files = sorted(
            name for name in entries
            if name.startswith('Contents/section') and name.endswith('.xml')
        )
        for section_file in section_files:
            root = ET.parse(BytesIO(entries[section_file])).getroot()
            roots[section_file] = root
            tables.extend(parser.parse_tables(root))

        logger.info(f"{path.name}: section {len(section_files)}개, 테이블 {len(tables)}개")
        return cls(path, roots, tables, entries)

    def get_table(self, index: int) -> ParsedTable:
        """index번째 테이블"""
        if not 0 <= index < len(self.tables):
            raise ValueError(f"테이블 인덱스 {index}가 범위를 벗어났습니다. (총 {len(self.tables)}개)")
        return self.tables[index]

    def save(self, output_path: Union[str, Path]) -> Path:
        """문서 저장 (수정된 테이블 반영)"""
        output_path = Path(output_path)

        if not self.is_hwpx:
            ET.ElementTree(self.roots['']).write(output_path, encoding='utf-8', xml_declaration=True)
            return output_path

        with zipfile.ZipFile(output_path, 'w', zipfile.ZIP_DEFLATED) as zf:
            for name, content in self.entries.items():
                if name in self.roots:
                    zf.writestr(name, ET.tostring(self.roots[name], encoding='UTF-8', xml_declaration=True))
                elif name == 'mimetype':
                    zf.writestr(name, content, compress_type=zipfile.ZIP_STORED)
                else:
                    zf.writestr(name, content)

        return output_path
