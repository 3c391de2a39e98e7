"""REST API exposing season stats and arbitration comparables."""

from __future__ import annotations

import logging
from dataclasses import asdict
from typing import List, Mapping

from fastapi import FastAPI, HTTPException, Query

from arbcase.api.schemas import (
    ComparableResponse,
    ComparableSummaryResponse,
    HistoricalComparableRow,
    HistoricalComparablesResponse,
)
from arbcase.config_loader import DataConfig
from arbcase.ingest import (
    TableSource,
    latest_season_stats,
    load_prediction,
    load_predictions,
    load_season_stats,
)
from arbcase.matching import (
    arbitration_tier,
    find_historical_comparables,
    find_player_season,
    load_comparables_with_stats,
    round_half_up,
    summarize_comparables,
)
from arbcase.models import ArbitrationPrediction, SeasonStats


logger = logging.getLogger(__name__)


def create_app(
    config: DataConfig | None = None,
    sources: Mapping[str, TableSource] | None = None,
) -> FastAPI:
    config = config or DataConfig.from_env()
    resolved = dict(config.sources())
    if sources:
        resolved.update(sources)

    app = FastAPI(title="arbcase")
    app.state.config = config
    app.state.sources = resolved

    stats_source = resolved["stats"]
    predictions_source = resolved["predictions"]
    historical_source = resolved["historical"]

    @app.get("/health")
    async def health() -> dict[str, str]:
        return {"status": "ok"}

    @app.get("/players/seasons", response_model=List[SeasonStats])
    async def player_seasons(name: str = Query(..., min_length=1)) -> List[SeasonStats]:
        return await load_season_stats(stats_source, name)

    @app.get("/players/season", response_model=SeasonStats)
    async def player_season(
        name: str = Query(..., min_length=1),
        season: int | None = Query(None, ge=1871),
    ) -> SeasonStats:
        stats = await find_player_season(
            stats_source,
            name,
            season,
            default_season=config.reference_season,
        )
        if stats is None:
            raise HTTPException(status_code=404, detail="Player season not found")
        return stats

    @app.get("/predictions", response_model=List[ArbitrationPrediction])
    async def predictions() -> List[ArbitrationPrediction]:
        return await load_predictions(predictions_source)

    @app.get("/predictions/lookup", response_model=ArbitrationPrediction)
    async def prediction_lookup(
        first: str = Query(..., min_length=1),
        last: str = Query(..., min_length=1),
    ) -> ArbitrationPrediction:
        prediction = await load_prediction(predictions_source, first, last)
        if prediction is None:
            raise HTTPException(status_code=404, detail="Prediction not found")
        return prediction

    @app.get("/comparables", response_model=List[ComparableResponse])
    async def comparables(limit: int = Query(5, ge=0, le=50)) -> List[ComparableResponse]:
        players = await load_comparables_with_stats(
            predictions_source,
            stats_source,
            config.roster,
            limit,
            season=config.reference_season,
        )
        return [
            ComparableResponse(
                **player.model_dump(exclude={"stats"}),
                status=arbitration_tier(player.mls).value,
                stats=player.stats,
            )
            for player in players
        ]

    @app.get("/historical-comparables", response_model=HistoricalComparablesResponse)
    async def historical_comparables(
        limit: int = Query(6, ge=0, le=50),
    ) -> HistoricalComparablesResponse:
        reference = await latest_season_stats(stats_source, config.reference_name)
        if reference is None:
            raise HTTPException(status_code=404, detail="Reference player stats not found")
        prediction = await load_prediction(
            predictions_source,
            config.reference_first_name,
            config.reference_last_name,
        )
        comps = await find_historical_comparables(historical_source, reference, limit)

        rows: List[HistoricalComparableRow] = []
        if prediction is not None:
            rows.append(_reference_row(reference, prediction, config.reference_all_star_appearances))
        for comp in comps:
            rows.append(
                HistoricalComparableRow(
                    player=comp.player,
                    club=comp.club,
                    season=comp.season,
                    status=arbitration_tier(comp.mls).value,
                    era=comp.era,
                    wins=round_half_up(comp.wins),
                    strikeouts=round_half_up(comp.strikeouts),
                    innings=comp.innings,
                    whip=comp.whip,
                    fip=comp.fip,
                    war=comp.war,
                    all_star_appearances=config.all_stars.appearances(comp.player),
                    salary=comp.salary,
                )
            )

        summary = summarize_comparables(
            reference,
            comps,
            reference_salary=prediction.predicted_salary if prediction else None,
            reference_all_star_appearances=config.reference_all_star_appearances,
            all_stars=config.all_stars,
        )
        logger.info(
            "Matched %d historical comparables for %s", len(comps), reference.name
        )
        return HistoricalComparablesResponse(
            reference=reference,
            rows=rows,
            summary=ComparableSummaryResponse(**asdict(summary)) if summary else None,
        )

    return app


def _reference_row(
    reference: SeasonStats,
    prediction: ArbitrationPrediction,
    all_star_appearances: int,
) -> HistoricalComparableRow:
    return HistoricalComparableRow(
        player=reference.name,
        club=reference.extra.get("Team", ""),
        season=reference.season,
        status=arbitration_tier(prediction.mls).value,
        era=reference.era,
        wins=round_half_up(reference.wins),
        strikeouts=round_half_up(reference.strikeouts),
        innings=reference.innings,
        whip=reference.whip,
        fip=reference.fip,
        war=reference.war,
        all_star_appearances=all_star_appearances,
        salary=prediction.predicted_salary or "TBD",
        highlight=True,
    )
