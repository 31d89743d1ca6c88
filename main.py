"""
Daily Horoscope — Main Orchestrator
===================================
One run per external trigger (cron, CI schedule). No in-process scheduler.

Pipeline:
  history gate → write horoscope (LLM) → save local backups
  → render embeds → post/edit Discord message → record run

Exit code 0 on success or "already ran today", 1 on any failure so the
scheduler can alert or retry.
"""

import sys
from datetime import datetime
from zoneinfo import ZoneInfo

from utils.config import Config, load_config
from utils.logger import attach_log_file, log_info, log_error, log_section
from utils.error_alert import send_error

# Node imports
from nodes import run_history, horoscope_writer, save_local
from nodes import render_embeds, post_to_discord


def today_label(tz_name: str, now: datetime | None = None) -> str:
    """Format a date like 'October 19, 2026' in the given time zone."""
    current = now.astimezone(ZoneInfo(tz_name)) if now else datetime.now(ZoneInfo(tz_name))
    return f"{current:%B} {current.day}, {current.year}"


def run(config: Config, today: str | None = None) -> int:
    """Run one publish cycle and return the process exit code."""
    node = "startup"
    try:
        attach_log_file(config.output_dir)
        today = today or today_label(config.timezone)
        log_section(f"Daily horoscope for {today}")

        # 1. Already ran today?
        node = "run_history"
        history = run_history.load_history(config.history_path)
        if run_history.already_ran(history, today):
            log_info("Already updated today.")
            return 0

        # 2. Generate
        node = "horoscope_writer"
        horoscope = horoscope_writer.execute(today, config)

        # 3. Local backups
        node = "save_local"
        save_local.execute(horoscope, config.output_dir)

        # 4. Render + publish
        node = "post_to_discord"
        payload = render_embeds.build_payload(horoscope)
        result = post_to_discord.execute(
            config.discord_webhook_url, config.message_id_path, payload
        )

        if not result.ok:
            detail = f"Discord {result.action} failed: HTTP {result.status_code} {result.error[:300]}"
            if result.handle_cleared:
                detail += " (stored message id cleared, next run posts a new message)"
            log_error(detail)
            send_error(config.alert_webhook_url, detail, node_name=node)
            return 1

        # 5. Remember today
        node = "run_history"
        run_history.record_run(config.history_path, history, today)

    except Exception as e:
        log_error(f"Critical Failure in {node}: {e}")
        send_error(config.alert_webhook_url, str(e), node_name=node)
        return 1

    log_section("Finished")
    return 0


# ── Main Entry Point ─────────────────────────────────────────


def main():
    log_info("🔮 Daily Horoscope starting...")
    config = load_config()
    sys.exit(run(config))


if __name__ == "__main__":
    main()
