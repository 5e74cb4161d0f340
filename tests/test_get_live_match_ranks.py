from __future__ import annotations

import httpx
import pytest

from application import AppContext, GetLiveMatchRanksUseCase, MatchResolver, open_live_ranks_service
from domain.errors import (
    InternalFailureError,
    NotFoundError,
    NotInGameError,
    RequestTimeoutError,
    TransportError,
    UnknownChampionError,
    UpstreamError,
)

from conftest import FakeGateway
from payloads import ACTIVE_GAME, DOCUMENT, ENTRIES, SUMMONER


class UnreachableGateway(FakeGateway):
    async def get_summoner_by_name(self, summoner_name):
        self.calls.append(("summoner", summoner_name))
        raise TransportError("ConnectError: [Errno -2] Name or service not known")


# ── Resolver ───────────────────────────────────────────────────────────


async def test_unknown_name_short_circuits(gateway):
    with pytest.raises(NotFoundError) as info:
        await MatchResolver(gateway).resolve_live_match("Nobody")
    assert info.value.summoner_name == "Nobody"
    assert isinstance(info.value.__cause__, UpstreamError)
    assert gateway.count("live_match") == 0
    assert gateway.count("ranks") == 0


async def test_summoner_not_in_game(faker):
    gateway = FakeGateway(summoners={"Faker": faker})
    with pytest.raises(NotInGameError):
        await MatchResolver(gateway).resolve_live_match("Faker")
    assert gateway.calls == [("summoner", "Faker"), ("live_match", "sid-faker")]


async def test_resolver_lets_transport_errors_through():
    with pytest.raises(TransportError):
        await MatchResolver(UnreachableGateway()).resolve_live_match("Faker")


# ── Use case ───────────────────────────────────────────────────────────


async def test_get_live_match_ranks(gateway, app_context):
    result = await GetLiveMatchRanksUseCase(gateway, app_context).execute("Faker")
    assert len(result) == 10
    assert [r.team for r in result] == ["BLUE"] * 5 + ["RED"] * 5


async def test_repeated_calls_give_identical_results(gateway, app_context):
    use_case = GetLiveMatchRanksUseCase(gateway, app_context)
    first = await use_case.execute("Faker")
    second = await use_case.execute("Faker")
    assert first == second


async def test_not_in_game_makes_no_rank_calls(faker, app_context):
    gateway = FakeGateway(summoners={"Faker": faker})
    with pytest.raises(NotInGameError):
        await GetLiveMatchRanksUseCase(gateway, app_context).execute("Faker")
    assert gateway.count("ranks") == 0


async def test_blank_name_is_not_found(gateway, app_context):
    with pytest.raises(NotFoundError):
        await GetLiveMatchRanksUseCase(gateway, app_context).execute("   ")
    assert gateway.calls == []


async def test_name_is_trimmed(gateway, app_context):
    await GetLiveMatchRanksUseCase(gateway, app_context).execute("  Faker ")
    assert gateway.calls[0] == ("summoner", "Faker")


async def test_partial_failure_is_not_raised(faker, live_match, app_context):
    gateway = FakeGateway(
        summoners={"Faker": faker},
        matches={faker.summoner_id: live_match},
        rank_failures={"sid-blue-two": UpstreamError(500, "Internal server error")},
    )
    result = await GetLiveMatchRanksUseCase(gateway, app_context).execute("Faker")
    assert len(result) == 10
    assert [f.summoner_name for f in result.failures] == ["Blue Two"]


async def test_transport_failure_while_resolving_is_internal(app_context):
    with pytest.raises(InternalFailureError) as info:
        await GetLiveMatchRanksUseCase(UnreachableGateway(), app_context).execute("Faker")
    assert not isinstance(info.value, (NotFoundError, NotInGameError))
    assert isinstance(info.value.__cause__, TransportError)


async def test_unknown_champion_is_internal(faker, live_match, app_context, catalog):
    from dataclasses import replace
    from domain.entities import Participant

    odd = Participant(summoner_id="sid-x", summoner_name="X", team_id=100, champion_id=4040)
    match = replace(live_match, participants=live_match.participants + (odd,))
    gateway = FakeGateway(summoners={"Faker": faker}, matches={faker.summoner_id: match})
    with pytest.raises(UnknownChampionError):
        await GetLiveMatchRanksUseCase(gateway, app_context).execute("Faker")


async def test_request_budget_bounds_latency(faker, live_match, credential, catalog):
    gateway = FakeGateway(
        summoners={"Faker": faker},
        matches={faker.summoner_id: live_match},
        delays={"sid-red-four": 30.0},
    )
    context = AppContext(credential=credential, catalog=catalog, request_budget=0.05)
    with pytest.raises(RequestTimeoutError) as info:
        await GetLiveMatchRanksUseCase(gateway, context).execute("Faker")
    assert isinstance(info.value, InternalFailureError)
    assert info.value.budget == 0.05


# ── End to end through HTTP ────────────────────────────────────────────


def riot_and_ddragon(request: httpx.Request) -> httpx.Response:
    host = request.url.host
    path = request.url.raw_path.decode()
    if host == "ddragon.leagueoflegends.com":
        document = {**DOCUMENT, "data": {**DOCUMENT["data"],
                                         "Ashe": {"id": "Ashe", "key": "22", "name": "Ashe"}}}
        return httpx.Response(200, json=document)
    if path.endswith("/summoners/by-name/Some%20Summoner"):
        return httpx.Response(200, json=SUMMONER)
    if path.endswith("/active-games/by-summoner/enc-summoner-id"):
        return httpx.Response(200, json=ACTIVE_GAME)
    if path.endswith("/entries/by-summoner/enc-summoner-id"):
        return httpx.Response(200, json=ENTRIES)
    return httpx.Response(404, json={"status": {"message": "Data not found", "status_code": 404}})


async def test_service_end_to_end(credential):
    async with open_live_ranks_service(credential, http_transport=httpx.MockTransport(riot_and_ddragon)) as service:
        assert service.catalog.version == "10.7.1"
        result = await service.get_live_match_ranks("Some Summoner")

        with pytest.raises(NotFoundError):
            await service.get_live_match_ranks("Missing")

    assert [(r.team, r.champion_name, r.summoner_name, r.solo, r.flex) for r in result] == [
        ("BLUE", "Aatrox", "Some Summoner", "GOLD IV", "SILVER II"),
        ("RED", "Ashe", "Other", "", ""),
    ]
    assert result[1].lookup_failed
    assert result.game_id == 2740000000


async def test_undecodable_rank_response_only_fails_that_row(credential):
    def handler(request: httpx.Request) -> httpx.Response:
        if request.url.raw_path.decode().endswith("/entries/by-summoner/enc-other"):
            return httpx.Response(200, headers={"Content-Encoding": "gzip"}, content=b"not gzip at all")
        return riot_and_ddragon(request)

    async with open_live_ranks_service(credential, http_transport=httpx.MockTransport(handler)) as service:
        result = await service.get_live_match_ranks("Some Summoner")

    assert len(result) == 2
    assert result[0].solo == "GOLD IV" and not result[0].lookup_failed
    assert result[1].summoner_name == "Other" and result[1].lookup_failed
    assert [f.summoner_id for f in result.failures] == ["enc-other"]
    assert "DecodingError" in result.failures[0].error
