"""
提示词构建
根据改写设置生成系统提示、温度和模型名
"""

from ..models.api_models import HumanizeSettings, Level, Mode, ModelType, Provider, Quality


BANNED_WORDS = (
    "En conclusion, En somme, Par ailleurs, De surcroît, Il est impératif, Il est crucial, "
    "Le paysage de, Dans un monde en constante évolution, Favoriser, Optimiser les synergies, "
    "En outre, De plus, Il est important de noter"
)

PARTIAL_SEGMENT_INSTRUCTION = (
    "CECI EST UNE PARTIE D'UN TEXTE PLUS LONG. Ne fais pas d'introduction, "
    "ne fais pas de conclusion générale. Contente-toi de réécrire ce segment spécifique."
)

PERSONAS = {
    Mode.ACADEMIQUE: "chercheur universitaire de haut niveau",
    Mode.BLOG: "copywriter web influent et créatif",
    Mode.FORMEL: "expert en communication corporate",
    Mode.INFORMEL: "blogueur lifestyle décontracté",
}
DEFAULT_PERSONA = "Ghostwriter expert spécialisé dans la réécriture indétectable"

LEVEL_TASKS = {
    Level.PILOTE_AUTOMATIQUE: "Réécris intégralement le texte pour le rendre 100% humain, fluide et spontané.",
    Level.BASIQUE: "Corrige légèrement le texte pour supprimer les patterns IA tout en restant très proche de l'original.",
}

DEFAULT_LENGTH_RULE = (
    "Garde approximativement le même nombre de mots que le texte original (Iso-longueur). "
    "Ne résume pas, ne coupe pas d'informations."
)
LENGTH_RULES = {
    Mode.SIMPLIFIER: "Synthétise le texte pour le rendre plus court et percutant (-20% de longueur).",
    Mode.DEVELOPPER: "Développe les idées pour enrichir le texte avec des détails pertinents (+20% de longueur).",
}

TONE_RULES = {
    Mode.FORMEL: "Garde le vouvoiement et une posture d'expert, mais sois direct.",
    Mode.ACADEMIQUE: "Garde le vouvoiement et une posture d'expert, mais sois direct.",
    Mode.INFORMEL: "Utilise l'humour, l'ironie légère et le tutoiement si adapté.",
    Mode.BLOG: "Utilise l'humour, l'ironie légère et le tutoiement si adapté.",
}

TEMPERATURES = {
    Quality.QUALITE: 0.7,
    Quality.AMELIORE: 1.0,
}
DEFAULT_TEMPERATURE = 0.9


def get_model(settings: HumanizeSettings) -> ModelType:
    """根据服务商和质量档位选择模型"""
    high_tier = settings.quality == Quality.AMELIORE
    if settings.provider == Provider.GEMINI:
        return ModelType.GEMINI_PRO if high_tier else ModelType.GEMINI_FLASH
    return ModelType.GROQ_QUALITY if high_tier else ModelType.GROQ_FAST


def get_temperature(quality: Quality) -> float:
    return TEMPERATURES.get(quality, DEFAULT_TEMPERATURE)


def build_system_instruction(settings: HumanizeSettings, is_partial: bool) -> str:
    """
    生成系统提示

    局部片段会附加上下文说明，要求模型不要自行添加引言和结论。
    """
    persona = PERSONAS.get(settings.mode, DEFAULT_PERSONA)
    task = LEVEL_TASKS[settings.level]
    length_rule = LENGTH_RULES.get(settings.mode, DEFAULT_LENGTH_RULE)
    tone_rule = TONE_RULES.get(settings.mode, "")
    context_instruction = PARTIAL_SEGMENT_INSTRUCTION if is_partial else ""

    return f"""
Tu es un {persona}.
Ta mission : Humaniser le texte fourni pour qu'il trompe les détecteurs d'IA, tout en respectant scrupuleusement le fond.
{task}

{context_instruction}

RÈGLES CRITIQUES (INTELLIGENCE MÉTIER) :
1.  **PROFESSIONNALISME (VOCABULAIRE)** :
    *   **CONSERVE IMPÉRATIVEMENT** les termes techniques, le jargon métier, les noms propres et le vocabulaire professionnel précis. Ne les "vulgarise" pas.
    *   Humanise uniquement la **structure** des phrases, les **transitions** et le **rythme**.

2.  **LONGUEUR & DENSITÉ** :
    *   {length_rule}

3.  **ANTI-DÉTECTION (GHOSTWRITING)** :
    *   **INTERDICTION** d'utiliser le jargon "ChatGPT" (LISTE NOIRE : {BANNED_WORDS}).
    *   **BURSTINESS** : Alterne phrases courtes et longues. Brise la monotonie.
    *   **TON** : {tone_rule}
    *   **MÉTHODE MIROIR** : Si l'entrée fait 10 lignes, la sortie doit faire ~10 lignes.

4.  **FORMATAGE** :
    *   Privilégie les paragraphes denses. Évite les listes à puces excessives.

TA RÉPONSE :
Renvoie UNIQUEMENT le texte réécrit. Pas de "Voici le texte", pas de guillemets. Juste le résultat.
"""
