"""Basic usage examples for the lapviz client and lap analysis."""

import sys

from lapviz import LapVizError, TelemetryClient
from lapviz.formatters import format_delta, format_distance, format_lap_time, format_speed
from lapviz.services import SessionSummaryService, analyze_lap, band_counts, build_heatmap


def main() -> None:
    with TelemetryClient() as client:
        # Upload a recording if one was given, otherwise use the newest stored session
        if len(sys.argv) > 1:
            session = client.upload(sys.argv[1])
        else:
            sessions = client.sessions()
            if not sessions:
                print("  No sessions stored.")
                return
            session = client.session(sessions[0].session_id)

        print(f"=== {session.track} - {session.driver} ({session.vehicle}) ===")
        summary = SessionSummaryService().summarize(session)
        print(f"  Best lap: {format_lap_time(summary.best_lap_time)}")
        if summary.top_speed is not None:
            print(f"  Top speed: {format_speed(summary.top_speed)} km/h")
        for row in summary.rows:
            marker = " *" if row.is_best else ""
            gap = f"+{row.gap_to_best:.3f}s" if row.gap_to_best else ""
            print(f"  Lap {row.lap_number}: {format_lap_time(row.lap_time)} {gap}{marker}")

        if summary.best_lap is None:
            return

        # Scrub through the best lap
        detail = client.lap_detail(session.session_id, summary.best_lap.lap_number)
        print(f"\n=== Lap {detail.lap_number}: {detail.sample_count} samples ===")
        for cursor in (10, 40, 70, 95):
            analysis = analyze_lap(detail.points, cursor)
            if analysis.readout is None:
                continue
            sample = analysis.readout.sample
            print(
                f"  {cursor:>3}%  {format_distance(sample.distance)}  "
                f"{sample.current_speed} km/h  sector {analysis.readout.sector.number}  "
                f"{format_delta(analysis.time_lost)}",
            )

        counts = band_counts(build_heatmap(analysis.series))
        print(f"\n  Heatmap: {counts['fast']} fast / {counts['mid']} mid / {counts['slow']} slow")


if __name__ == "__main__":
    try:
        main()
    except LapVizError as exc:
        print(f"Error: {exc}")
        sys.exit(1)
