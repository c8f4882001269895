"""Built-in country list shown when no annotation source is usable.

Entries carry no coordinates: coordinates only ever come from map shapes.
"""

from typing import Optional, Tuple

from worldmapidentity.models import DEFAULT_COLOR, CanonicalCountry


def _c(code: str, name: str, description: str, group: Optional[str] = None) -> CanonicalCountry:
    return CanonicalCountry(
        code=code,
        name=name,
        color=DEFAULT_COLOR,
        description=description,
        group=group,
    )


DEFAULT_COUNTRIES: Tuple[CanonicalCountry, ...] = (
    # Asia
    _c("CHN", "China", "The world's most populous country, with a history spanning over 5,000 years.", "china"),
    _c("TWN", "Taiwan", "An island in East Asia known for its high-tech industry and mountain landscapes.", "china"),
    _c("HKG", "Hong Kong", "A global financial hub and international trade center.", "china"),
    _c("SGP", "Singapore", "A city-state in Southeast Asia and a major financial center."),
    _c("JPN", "Japan", "An island nation in East Asia famous for its culture and technology."),
    _c("KOR", "South Korea", "A country in East Asia known for technological innovation and pop culture."),
    _c("IND", "India", "A country known for its diverse culture, rich history and growing tech industry."),
    _c("IDN", "Indonesia", "The world's largest archipelago nation."),
    _c("PHL", "Philippines", "An archipelago in Southeast Asia with a rich cultural heritage."),
    _c("TUR", "Turkey", "A transcontinental country bridging Europe and Asia."),
    # Europe
    _c("CHE", "Switzerland", "A landlocked Alpine country known for precision engineering."),
    _c("DEU", "Germany", "The most populous country in the European Union."),
    _c("BEL", "Belgium", "A Western European country and seat of the European Union institutions."),
    _c("FRA", "France", "One of the world's most visited countries, known for art and cuisine."),
    _c("NLD", "Netherlands", "A Northwestern European country famous for windmills, tulips and cycling."),
    _c("GBR", "United Kingdom", "An island nation in Northwestern Europe with worldwide cultural influence."),
    _c("DNK", "Denmark", "A Nordic country known for design and quality of life."),
    _c("SWE", "Sweden", "The largest Nordic country, known for innovation and natural landscapes."),
    _c("GEO", "Georgia", "A country at the crossroads of Europe and Asia with an ancient wine culture."),
    _c("RUS", "Russia", "The world's largest country by area, spanning Eastern Europe and Northern Asia."),
    _c("UKR", "Ukraine", "The second-largest country in Europe, known for its fertile farmland."),
    # Others
    _c("NZL", "New Zealand", "An island country in the southwestern Pacific Ocean."),
    _c("PER", "Peru", "A South American country known for the Incan civilization and its cuisine."),
    _c("BRA", "Brazil", "The largest country in South America, home to most of the Amazon rainforest."),
    _c("USA", "United States", "A diverse nation spanning North America."),
    _c("ARG", "Argentina", "A South American country famous for tango and Patagonia."),
    _c("AUS", "Australia", "The world's largest island and smallest continent."),
    _c("CHL", "Chile", "A long, narrow South American country stretching from desert to glaciers."),
    _c("ISR", "Israel", "A Middle Eastern country of historical and religious significance."),
    _c("MEX", "Mexico", "A North American country with ancient civilizations and vibrant festivals."),
)


__all__ = [
    "DEFAULT_COUNTRIES",
]
