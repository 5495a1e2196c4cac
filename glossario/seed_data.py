"""
Static glossary data bundled with the service.

LOCAL_TERMS answers lookups instantly when the store has nothing (demos, offline
mode). STATIC_SUMMARIES is the listing shown before the store is populated, and
DEFAULT_SEED_TERMS is the batch the seeder walks when given no list.
"""

from typing import Dict, List

from .schemas import PracticalUsage, TermRecord, TermSummary, TitledText

# Keyed by lower-cased, trimmed raw text (not the slug), see TermResolver.
LOCAL_TERMS: Dict[str, TermRecord] = {
    "api": TermRecord(
        id="api",
        term="API",
        full_term="Application Programming Interface",
        category="Desenvolvimento",
        definition=(
            "APIs permitem que diferentes sistemas de software conversem entre si automaticamente, "
            "eliminando tarefas manuais e conectando sua empresa ao mercado digital."
        ),
        phonetic="Ei-pi-ai",
        slang=None,
        translation="INTERFACE DE PROGRAMAÇÃO DE APLICATIVOS",
        examples=[
            TitledText(
                title="AUTOMAÇÃO DE FLUXOS",
                description="Elimina a intervenção humana ao conectar processos operacionais críticos.",
            ),
            TitledText(
                title="SINCRONIZAÇÃO DE DADOS",
                description="Mantém Vendas, RH e Financeiro atualizados em todas as plataformas.",
            ),
        ],
        analogies=[
            TitledText(
                title="O GARÇOM NO RESTAURANTE",
                description=(
                    "Você (cliente) pede ao garçom (API), que leva o pedido à cozinha (sistema) "
                    "e traz o prato."
                ),
            ),
            TitledText(
                title="TOMADA UNIVERSAL",
                description="Interface padrão para conectar qualquer aparelho à energia sem saber como a rede funciona.",
            ),
        ],
        practical_usage=PracticalUsage(
            title="Na reunião de alinhamento (Daily)",
            content=(
                "Pessoal, a API de pagamentos caiu porque o gateway mudou a autenticação. "
                "Vou precisar refatorar a integração hoje à tarde pra gente voltar a vender."
            ),
        ),
        related_terms=["Endpoint", "JSON", "REST", "Webhook", "Gateway", "SDK"],
    ),
}

STATIC_SUMMARIES: List[TermSummary] = [
    TermSummary(id="api", term="API", category="Desenvolvimento",
                definition="Interface que permite que dois aplicativos se comuniquem entre si automaticamente."),
    TermSummary(id="agile", term="Agile", category="Agile & Produto",
                definition="Metodologia de gestão focada em entregas rápidas e melhoria contínua."),
    TermSummary(id="aws", term="AWS", category="Infraestrutura",
                definition="Plataforma de serviços de computação em nuvem da Amazon."),
    TermSummary(id="devops", term="DevOps", category="Infraestrutura",
                definition="Cultura que une desenvolvimento (Dev) e operações (Ops) para entregas mais rápidas."),
    TermSummary(id="docker", term="Docker", category="Infraestrutura",
                definition="Plataforma popular para criar e gerenciar containers."),
    TermSummary(id="kubernetes", term="Kubernetes", category="Infraestrutura",
                definition="Sistema para automatizar a gestão de aplicações em containers."),
    TermSummary(id="python", term="Python", category="Dados & IA",
                definition="Linguagem de programação popular em ciência de dados e automação."),
    TermSummary(id="sql", term="SQL", category="Dados & IA",
                definition="Linguagem padrão para gerenciar bancos de dados relacionais."),
]

DEFAULT_SEED_TERMS: List[str] = [
    "Kubernetes", "Docker", "CI/CD", "Microservices", "Serverless",
    "React", "Node.js", "Python", "Machine Learning", "LLM",
    "Cybersecurity", "Zero Trust", "Firewall", "VPN", "Encryption",
    "Agile", "Scrum", "Kanban", "MVP", "Product Market Fit",
]
