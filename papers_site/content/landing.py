# papers_site/content/landing.py

from __future__ import annotations

from papers_site.content.gradual_disempowerment import SLUG as ESSAY_SLUG
from papers_site.models.page import Page, PageLink, Paragraph, Section


def build_page() -> Page:
    economy = PageLink(
        label="Misaligned Economy",
        href="",
        children=(
            PageLink("The Current Economic Paradigm", "#current-paradigm"),
            PageLink("AI as a Unique Economic Disruptor", "#ai-disruptor"),
            PageLink("Human Alignment of the Economy", "#human-alignment"),
            PageLink("Transition to AI-dominated Economy", "#ai-transition"),
        ),
    )
    summary = PageLink(
        label="Executive Summary",
        href="",
        children=(
            economy,
            PageLink("Misaligned Culture", ""),
            PageLink("Misaligned States", ""),
            PageLink("Mutual Reinforcement", ""),
            PageLink("Mitigating the Risk", ""),
            PageLink("Related Work", ""),
            PageLink("Conclusion", ""),
        ),
    )

    return Page(
        slug="",
        title="Gradual Disempowerment",
        subtitle="Misaligned Economy",
        links=[
            summary,
            PageLink(
                "Systemic Existential Risks from Incremental AI Development",
                f"/{ESSAY_SLUG}",
            ),
        ],
        sections=[
            Section(
                id="current-paradigm",
                title="The Current Economic Paradigm",
                level=3,
                in_toc=False,
                blocks=(
                    Paragraph("*** This website is demo, not a real paper. ***"),
                    Paragraph(
                        "The modern economy allocates goods and services mostly based on "
                        "supply and demand. That demand is largely driven by human desires "
                        "and revealed preferences: US consumer spending is fairly stable at "
                        "around 70% of GDP. Meanwhile, supply is also heavily driven by human "
                        "labor (both manual and cognitive): the share of US GDP directed "
                        "towards paying for labor has stayed remarkably stable at around 60% "
                        "for over a century. These statistics reflect the nature of the "
                        "modern economy: it is primarily a system of humans producing goods "
                        "and services for other humans, with human preferences and human "
                        "capabilities driving the majority of both supply and demand."
                    ),
                    Paragraph(
                        "To give a concrete example, individual consumers in economically "
                        "developed areas can reliably purchase coffee. This is possible "
                        "because of the labor of countless individuals now and in the past, "
                        "mostly motivated by self-interest, to create and maintain a "
                        "sophisticated system of production, transportation, and "
                        "distribution, from farmers and agricultural scientists to logistics "
                        "workers and baristas. As a consumer, the economy appears to "
                        "helpfully provide goods and services. This apparent alignment "
                        "occurs because consumers have money to spend, which in turn is "
                        "mainly because consumers can perform useful economic work."
                    ),
                    Paragraph(
                        "But AI has the potential to disrupt this dynamic in a way that no "
                        "previous technology has [@buhl2024safety; @shevlane2023evaluation]. "
                        "If AI labor replaces human labor, then by default, money will cease "
                        "to mainly flow to workers. I elaborate on the consequences of this "
                        "change in the remainder of this section."
                    ),
                ),
            ),
        ],
    )
