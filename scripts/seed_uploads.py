"""Generate sample MDU and tariff CSV files and optionally upload them to S3.

Usage:
    python scripts/seed_uploads.py --out-dir data/samples
    python scripts/seed_uploads.py --bucket bulkentry-uploads --endpoint-url http://localhost:4566
"""

from __future__ import annotations

import argparse
from pathlib import Path
from typing import Any

import boto3

MDU_HEADER = [
    "CIVIC_NUMBER", "STREET_LABEL_EN", "STREET_LABEL_FR", "STREET_DIRECTION_EN",
    "STREET_DIRECTION_FR", "ADD_INFO_EN", "ADD_INFO_FR", "EXPIRY_DATE", "MDU_VISIBLE",
    "CITY_ID", "STREET_ID", "PROVINCE_ID", "FILE_TYPE", "POSTING_DATE_DEADLINE", "COMMENT",
]

TARIFF_HEADER = [
    "TARIFF_CODE", "DESCRIPTION_EN", "DESCRIPTION_FR", "RATE", "UNIT", "PROVINCE",
    "EFFECTIVE_DATE", "EXPIRY_DATE", "CATEGORY", "NOTES",
]

STREETS = [("Main St", "Rue Main"), ("King St", "Rue King"), ("Queen St", "Rue Queen")]
FILE_TYPES = ["1", "2", "3", ""]


def build_mdu_rows(count: int, invalid_every: int = 0) -> list[list[str]]:
    """MDU rows; every ``invalid_every``-th row has no civic number."""
    rows: list[list[str]] = []
    for i in range(1, count + 1):
        street_en, street_fr = STREETS[i % len(STREETS)]
        civic = "" if invalid_every and i % invalid_every == 0 else str(100 + i)
        rows.append([
            civic, street_en, street_fr, "", "", "", "",
            f"12/31/{2025 + i % 3}", "1" if i % 2 else "0",
            str(1000 + i), str(2000 + i), str(i % 10 + 1),
            FILE_TYPES[i % len(FILE_TYPES)], f"0{i % 9 + 1}/15/2024 09:00", "",
        ])
    return rows


def build_tariff_rows(count: int) -> list[list[str]]:
    return [
        [
            f"T-{i:03d}", f"Service {i}", f"Service {i}", f"{i * 4.5:.2f}", "month",
            "ON", "2024-01-01", "", "Residential", "",
        ]
        for i in range(1, count + 1)
    ]


def render_csv(header: list[str], rows: list[list[str]]) -> bytes:
    lines = [",".join(header)] + [",".join(row) for row in rows]
    return ("\n".join(lines) + "\n").encode("utf-8")


def build_samples(mdu_count: int = 25, tariff_count: int = 10, invalid_every: int = 7) -> dict[str, bytes]:
    """File name -> CSV bytes for one MDU and one tariff sample."""
    return {
        "mdu_sample.csv": render_csv(MDU_HEADER, build_mdu_rows(mdu_count, invalid_every)),
        "tariff_sample.csv": render_csv(TARIFF_HEADER, build_tariff_rows(tariff_count)),
    }


def write_samples(out_dir: Path, samples: dict[str, bytes]) -> list[Path]:
    out_dir.mkdir(parents=True, exist_ok=True)
    paths = []
    for name, data in samples.items():
        path = out_dir / name
        path.write_bytes(data)
        print(f"  Wrote {path}")
        paths.append(path)
    return paths


def upload_samples(s3: Any, bucket: str, prefix: str, samples: dict[str, bytes]) -> list[str]:
    """Upload samples, creating the bucket if needed. Returns s3:// locations."""
    existing = {b["Name"] for b in s3.list_buckets().get("Buckets", [])}
    if bucket not in existing:
        s3.create_bucket(Bucket=bucket)
        print(f"  Created bucket {bucket}")
    locations = []
    for name, data in samples.items():
        key = f"{prefix.rstrip('/')}/{name}" if prefix else name
        s3.put_object(Bucket=bucket, Key=key, Body=data, ContentType="text/csv")
        print(f"  Uploaded s3://{bucket}/{key}")
        locations.append(f"s3://{bucket}/{key}")
    return locations


def main() -> None:
    parser = argparse.ArgumentParser(description="Generate sample CSV uploads for bulkentry")
    parser.add_argument("--out-dir", default=None, help="Write samples to this directory")
    parser.add_argument("--bucket", default=None, help="Upload samples to this S3 bucket")
    parser.add_argument("--prefix", default="incoming", help="S3 key prefix")
    parser.add_argument("--endpoint-url", default=None, help="S3 endpoint (e.g. http://localhost:4566)")
    parser.add_argument("--region", default="us-east-1", help="AWS region")
    parser.add_argument("--mdu-rows", type=int, default=25)
    parser.add_argument("--tariff-rows", type=int, default=10)
    args = parser.parse_args()

    samples = build_samples(args.mdu_rows, args.tariff_rows)

    if args.out_dir:
        print("Writing samples...")
        write_samples(Path(args.out_dir), samples)

    if args.bucket:
        kwargs: dict[str, Any] = {"region_name": args.region}
        if args.endpoint_url:
            kwargs["endpoint_url"] = args.endpoint_url
        print("Uploading samples...")
        upload_samples(boto3.client("s3", **kwargs), args.bucket, args.prefix, samples)

    print("Done!")


if __name__ == "__main__":
    main()
