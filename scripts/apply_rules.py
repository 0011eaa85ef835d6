# scripts/apply_rules.py
#!/usr/bin/env python
# -*- coding: utf-8 -*-
import sys, os, io, json, argparse

from tqdm import tqdm

PROJECT_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
if PROJECT_ROOT not in sys.path:
    sys.path.insert(0, PROJECT_ROOT)

from concertdraft.rules.postrules import parse_concert_announcement


def main():
    ap = argparse.ArgumentParser()
    ap.add_argument("--in_jsonl", required=True, help="입력(jsonl): {text, id?} 한 줄에 공지 하나")
    ap.add_argument("--out_jsonl", required=True)
    args = ap.parse_args()

    os.makedirs(os.path.dirname(args.out_jsonl) or ".", exist_ok=True)
    n = 0
    with io.open(args.in_jsonl, "r", encoding="utf-8") as f, io.open(args.out_jsonl, "w", encoding="utf-8") as g:
        for line in tqdm(f, desc="parse", unit="doc"):
            if not line.strip(): continue
            ex = json.loads(line)
            draft = parse_concert_announcement(ex.get("text") or "")
            row = draft.to_json_dict()
            # 입력 id 있으면 보존
            if "id" in ex:
                row["id"] = ex["id"]
            g.write(json.dumps(row, ensure_ascii=False) + "\n")
            n += 1
    print(f"[DONE] wrote {args.out_jsonl} (n={n})")


if __name__ == "__main__":
    main()
