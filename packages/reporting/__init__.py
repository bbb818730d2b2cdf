from .io import write_scores, write_scores_file, write_manifest, timestamp_id, git_commit_or_unknown

__all__ = ["write_scores", "write_scores_file", "write_manifest", "timestamp_id", "git_commit_or_unknown"]
