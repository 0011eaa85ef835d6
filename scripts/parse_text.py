#!/usr/bin/env python
# -*- coding: utf-8 -*-
"""
공지 텍스트 파일(또는 URL) → 공연 초안 JSON

예)
python scripts/parse_text.py `
>> --text_file notice.txt `
>> --out outputs/draft.json `
>> --quiet
"""

import os, sys, io, json, argparse, logging

# ── 프로젝트 루트 경로를 sys.path에 주입 (항상 concertdraft.* 임포트 가능)
PROJECT_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
if PROJECT_ROOT not in sys.path:
    sys.path.insert(0, PROJECT_ROOT)

from concertdraft.core.logging import configure_logging
from concertdraft.inference.fetch import SourceFetchError
from concertdraft.inference.importer import EmptyInputError, import_announcement


def main():
    ap = argparse.ArgumentParser()
    src = ap.add_mutually_exclusive_group(required=True)
    src.add_argument("--text_file", help="분석할 텍스트 파일 경로")
    src.add_argument("--url", help="트윗/프로모터 페이지 URL")
    ap.add_argument("--out", default=None, help="최종 JSON 결과를 파일로 저장")
    ap.add_argument("--quiet", action="store_true",
                    help="최종 JSON만 stdout에 출력(경고 요약 숨김)")
    ap.add_argument("--strip_raw", action="store_true",
                    help="최종 JSON에서 rawText 키 제거")
    args = ap.parse_args()

    configure_logging(logging.WARNING if args.quiet else logging.INFO)

    text = None
    if args.text_file:
        if not os.path.exists(args.text_file):
            raise FileNotFoundError(f"--text_file not found: {args.text_file}")
        with io.open(args.text_file, "r", encoding="utf-8") as f:
            text = f.read()

    try:
        result = import_announcement(url=args.url, text=text)
    except (SourceFetchError, EmptyInputError) as exc:
        print(exc.message, file=sys.stderr)
        sys.exit(1)

    out = {"draft": result.draft.to_json_dict(), "source": result.source.to_json_dict()}
    if args.strip_raw:
        out["draft"].pop("rawText", None)

    result_str = json.dumps(out, ensure_ascii=False, indent=2)
    print(result_str)
    if not args.quiet:
        for w in result.draft.warnings:
            print(f"[WARN] {w}", file=sys.stderr)

    if args.out:
        os.makedirs(os.path.dirname(args.out) or ".", exist_ok=True)
        with io.open(args.out, "w", encoding="utf-8") as f:
            f.write(result_str)


if __name__ == "__main__":
    main()
