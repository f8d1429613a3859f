"""
Draft Presenter

Turns the application layer's DTOs into Discord embeds. Everything shown
comes from the draft's published state; nothing is recomputed here.
"""

from typing import List

import discord

from ...application.dto import DraftStatusDTO, PickDTO, SelectionResult, SelectorDTO
from ...application.interfaces import IDraftPresenter

COMPLETE_COLOR = 0x2ECC71
IDLE_COLOR = 0x95A5A6
MAX_PICKS_SHOWN = 10
MAX_FIELD_LENGTH = 1024


def parse_color(value: str, fallback: int = IDLE_COLOR) -> int:
    """'#673AB7' -> 0x673AB7"""
    try:
        return int(value.lstrip("#"), 16)
    except (AttributeError, ValueError):
        return fallback


def _truncate(text: str, limit: int = MAX_FIELD_LENGTH) -> str:
    if len(text) <= limit:
        return text
    return text[:limit - 1] + "…"


class DraftPresenter(IDraftPresenter):
    """Builds the embeds the film draft commands send"""

    def create_status_embed(self, status: DraftStatusDTO) -> discord.Embed:
        """Turn indicator, round progress and each selector's picks"""
        if status.entry_count == 0:
            return discord.Embed(
                title="🎬 Film Draft",
                description="No film list loaded yet. Use `list <letterboxd url>` to start.",
                color=IDLE_COLOR
            )

        if not status.has_draft:
            return self._create_waiting_embed(status)

        if status.is_complete:
            embed = discord.Embed(
                title="🏁 Draft complete",
                description=(f"All {status.available_selections} picks are in. "
                             f"{status.remaining_selections} films were left on the list."),
                color=COMPLETE_COLOR
            )
        else:
            embed = self._create_turn_embed(status)

        for selector in status.selectors:
            embed.add_field(
                name=self._selector_heading(selector),
                value=_truncate(self._format_picks(selector.picks)),
                inline=True
            )

        if status.source_url:
            embed.set_footer(text=status.source_url)
        return embed

    def _create_waiting_embed(self, status: DraftStatusDTO) -> discord.Embed:
        if not status.selectors:
            description = f"{status.entry_count} films loaded. Use `join` to take part."
        else:
            names = ", ".join(selector.name for selector in status.selectors)
            description = (f"{status.available_entries} films are too few for {len(status.selectors)} "
                           f"selectors ({names}). Load a longer list or remove someone.")
        return discord.Embed(title="🎬 Film Draft", description=description, color=IDLE_COLOR)

    def _create_turn_embed(self, status: DraftStatusDTO) -> discord.Embed:
        active = status.active_selector
        color = parse_color(active.color) if active else IDLE_COLOR
        title = f"🎬 {active.name}'s turn" if active else "🎬 Film Draft"
        description = (
            f"Round **{status.round_number}/{status.rounds_count}** · "
            f"turn {status.round_turn_number} · "
            f"pick {status.selections_made + 1} of {status.available_selections}\n"
            f"{status.picks_left_in_turn} pick(s) left this turn"
        )
        return discord.Embed(title=title, description=description, color=color)

    def create_selection_embed(self, result: SelectionResult) -> discord.Embed:
        """Announce a successful pick and who goes next"""
        embed = discord.Embed(
            title="✅ Pick made",
            description=f"**{result.selector_name}** picked **{result.entry_title}**",
            color=COMPLETE_COLOR if result.draft_completed else discord.Color.blue().value
        )
        if result.draft_completed:
            embed.add_field(name="Draft", value="Complete 🏁", inline=False)
        elif result.next_selector:
            embed.add_field(name="Up next", value=result.next_selector, inline=False)
        return embed

    def create_picks_embed(self, picks: List[PickDTO], limit: int = MAX_PICKS_SHOWN) -> discord.Embed:
        """Most recent picks, newest first"""
        recent = list(reversed(picks))[:limit]
        lines = [
            f"`{pick.global_order:>3}` R{pick.round_number} **{pick.selector_name}**: "
            f"{pick.display_name}"
            for pick in recent
        ]
        return discord.Embed(
            title="📜 Recent picks",
            description="\n".join(lines) if lines else "No picks yet",
            color=IDLE_COLOR
        )

    def _selector_heading(self, selector: SelectorDTO) -> str:
        marker = "▶ " if selector.is_active else ""
        return f"{marker}{selector.name} ({selector.pick_count})"

    def _format_picks(self, picks: List[str]) -> str:
        if not picks:
            return "—"
        return "\n".join(f"{index}. {title}" for index, title in enumerate(picks, start=1))
