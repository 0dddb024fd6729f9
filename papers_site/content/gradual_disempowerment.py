# papers_site/content/gradual_disempowerment.py

from __future__ import annotations

from papers_site.models.page import (
    Heading,
    ListBlock,
    Page,
    Paragraph,
    Section,
    TableBlock,
)

SLUG = "gradual-disempowerment"


def build_page() -> Page:
    return Page(
        slug=SLUG,
        title="Systemic Existential Risks from Incremental AI Development",
        byline=["Research Team", "July 20, 2024"],
        back_link=True,
        sections=[
            Section(
                id="abstract",
                title="Abstract",
                blocks=(
                    Paragraph(
                        "AI risk scenarios usually portray a relatively sudden loss of human "
                        "control to AIs, outmaneuvering individual humans and human "
                        "institutions, due to a sudden increase in AI capabilities, or a "
                        "coordinated betrayal. However, I argue that even an incremental "
                        "increase in AI capabilities, without any coordinated power-seeking, "
                        "poses a substantial risk of eventual human disempowerment. This loss "
                        "of human influence will be centrally driven by having more "
                        "competitive machine alternatives to humans in almost all societal "
                        "functions [@russell2019human].",
                        style="abstract",
                    ),
                ),
            ),
            Section(
                id="introduction",
                title="Introduction",
                blocks=(
                    Paragraph(
                        "A growing body of research points to the possibility that artificial "
                        "intelligence (AI) might eventually pose a large-scale or even "
                        "existential risk to humanity [@bostrom2014superintelligence]. "
                        "Current discussions about AI risk largely focus on two scenarios:"
                    ),
                    ListBlock(
                        items=(
                            "<strong>Deliberate misuse</strong>, such as cyberattacks and the "
                            "deployment of novel bioweapons",
                            "<strong>Abrupt harmful actions</strong> by autonomous misaligned "
                            "systems attempting to secure decisive strategic advantage, "
                            "potentially following a period of deception",
                        ),
                        ordered=True,
                    ),
                    Paragraph(
                        "In this paper, I explore an alternative scenario: a &lsquo;Gradual "
                        "Disempowerment&rsquo; where AI advances and proliferates without "
                        "necessarily any acute jumps in capabilities or apparent misalignment."
                    ),
                ),
            ),
            Section(
                id="core-arguments",
                title="Core Arguments",
                level=3,
                blocks=(
                    Paragraph("The argument is structured around six core claims:"),
                    ListBlock(
                        items=(
                            "Humans currently engage with numerous large-scale societal "
                            "systems that are influenced by human action and produce outcomes "
                            "that shape the collective future",
                            "These systems maintain alignment through explicit human actions "
                            "and implicit reliance on human labor and cognition",
                            "If systems become less reliant on human labor and cognition, human "
                            "ability to align them would decrease substantially "
                            "[@bengio2024governance]",
                        ),
                    ),
                ),
            ),
            Section(
                id="methodology",
                title="Methodology",
                blocks=(
                    Heading("Analysis Framework"),
                    Paragraph("The focus is primarily on three systems:"),
                    TableBlock(
                        header=("System", "Current Role", "AI Replacement Risk"),
                        rows=(
                            ("Economy", "Human labor-centered", "High"),
                            ("Culture", "Human creation-centered", "Medium"),
                            ("Governance", "Human decision-making", "Medium-Low"),
                        ),
                    ),
                ),
            ),
            Section(
                id="results",
                title="Results and Discussion",
                blocks=(
                    Paragraph(
                        "Analysis of AI impact on economic systems reveals significant "
                        "interdependencies. Economic power can be used to influence policy and "
                        "regulation, which in turn can generate more economic power or alter "
                        "the economic landscape."
                    ),
                    Paragraph(
                        "&ldquo;What makes this transition particularly hard to resist is that "
                        "pressures on each societal system bleed into the others.&rdquo;",
                        style="quote",
                    ),
                ),
            ),
            Section(
                id="conclusion",
                title="Conclusion",
                blocks=(
                    Paragraph(
                        "Gradual AI development may be as risky as sudden changes. To mitigate "
                        "these risks, there is need for:"
                    ),
                    ListBlock(
                        items=(
                            "<strong>Interdisciplinary approach</strong>: Integration of "
                            "technology, policy, and social sciences",
                            "<strong>Proactive response</strong>: Preventive measures before "
                            "problems occur",
                            "<strong>Continuous monitoring</strong>: Real-time tracking of "
                            "change processes",
                        ),
                    ),
                    Paragraph(
                        "Because this disempowerment would be global and permanent, and "
                        "because human flourishing requires substantial resources in global "
                        "terms, it could plausibly lead to human extinction or similar "
                        "outcomes."
                    ),
                ),
            ),
        ],
        footer_notes=[
            "<strong>Author Information:</strong> Research Team - AI Objectives Institute",
            "<strong>Keywords:</strong> artificial intelligence, social systems, risk "
            "analysis, policy research",
            "<strong>Received:</strong> June 15, 2024 | <strong>Accepted:</strong> "
            "July 20, 2024",
        ],
    )
