"""CLI for clustering articles."""

from __future__ import annotations

import logging
from datetime import datetime, timezone

from dotenv import load_dotenv

from common.aws import build_s3_key, get_bucket_name, read_json_from_s3, upload_json_to_s3
from common.cli_helpers import setup_logging
from cluster_articles.config import load_config, set_config
from cluster_articles.helpers import log_cluster_report, parse_cluster_articles_args
from cluster_articles.io.read_articles import load_raw_articles, parse_raw_articles_document
from cluster_articles.io.write_output import build_output_document, write_clustered_output
from cluster_articles.pipeline import run_clustering

logger = logging.getLogger(__name__)


def main(argv: list[str] | None = None) -> None:
    load_dotenv()
    setup_logging()

    args = parse_cluster_articles_args(argv)
    config = load_config(args.config)
    set_config(config)

    if args.input_s3_key:
        bucket = get_bucket_name()
        logger.info("Loading raw articles from s3://%s/%s", bucket, args.input_s3_key)
        articles = parse_raw_articles_document(read_json_from_s3(bucket, args.input_s3_key))
    else:
        articles = load_raw_articles(args.input or config.input_path)

    now = datetime.now(timezone.utc)
    output, clusters = run_clustering(articles, now=now)
    log_cluster_report(clusters, output.clusters)

    if args.load_s3:
        key = build_s3_key(
            "clustered_articles",
            now,
            f"clustered_articles_{now.strftime('%Y_%m_%d_%H_%M')}.json",
        )
        upload_json_to_s3(build_output_document(output), get_bucket_name(), key)

    if args.load_local:
        write_clustered_output(output, args.output or config.output_path)


if __name__ == "__main__":
    main()
