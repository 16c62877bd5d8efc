"""
Filter vocabulary for beginner issue discovery.

Values are GitHub search qualifiers or keywords and are passed into the
search query as-is; labels are what the frontend shows.
"""

from .models.catalog_models import (
    CategoryOption, FilterCatalog, FilterOption, PopularityOption
)


# Labels maintainers commonly put on approachable issues
BEGINNER_LABELS = [
    "good first issue",
    "beginner",
    "beginner-friendly",
    "easy",
    "first-timers-only",
    "help wanted",
    "starter",
    "low-hanging-fruit",
    "up-for-grabs",
    "newbie",
    "contributions welcome",
]

DEFAULT_LABELS = ["good first issue"]

LANGUAGES = [
    FilterOption(value="", label="All Languages"),
    FilterOption(value="javascript", label="JavaScript"),
    FilterOption(value="typescript", label="TypeScript"),
    FilterOption(value="python", label="Python"),
    FilterOption(value="java", label="Java"),
    FilterOption(value="go", label="Go"),
    FilterOption(value="rust", label="Rust"),
    FilterOption(value="cpp", label="C++"),
    FilterOption(value="csharp", label="C#"),
    FilterOption(value="ruby", label="Ruby"),
    FilterOption(value="php", label="PHP"),
    FilterOption(value="swift", label="Swift"),
    FilterOption(value="kotlin", label="Kotlin"),
]

SORT_OPTIONS = [
    FilterOption(value="created", label="Newest First"),
    FilterOption(value="updated", label="Recently Updated"),
    FilterOption(value="comments", label="Most Discussed"),
    FilterOption(value="reactions", label="Most Reactions"),
]

POPULARITY_OPTIONS = [
    PopularityOption(value="", label="All Repositories", description="Any repository"),
    PopularityOption(value="stars:>10000", label="Very Popular (10k+ stars)",
                     description="Top trending repos"),
    PopularityOption(value="stars:>1000", label="Popular (1k+ stars)",
                     description="Well-known projects"),
    PopularityOption(value="stars:>100", label="Growing (100+ stars)",
                     description="Up and coming repos"),
    PopularityOption(value="stars:<100", label="New Projects (<100 stars)",
                     description="Help new projects grow"),
]

LABEL_OPTIONS = [
    FilterOption(value="good first issue", label="Good First Issue"),
    FilterOption(value="up-for-grabs", label="Up for Grabs"),
    FilterOption(value="beginner", label="Beginner"),
    FilterOption(value="beginner-friendly", label="Beginner Friendly"),
    FilterOption(value="first-timers-only", label="First Timers Only"),
    FilterOption(value="help wanted", label="Help Wanted"),
    FilterOption(value="easy", label="Easy"),
    FilterOption(value="low-hanging-fruit", label="Low Hanging Fruit"),
]

# Topic groups, matched as keywords against issue text
CATEGORIES = [
    CategoryOption(value="", label="All", icon="✓"),
    CategoryOption(value="AI OR machine-learning OR ML", label="Artificial Intelligence", icon="🤖"),
    CategoryOption(value="database OR data OR analytics", label="Data", icon="📊"),
    CategoryOption(value="CLI OR tooling OR developer", label="Development tools", icon="🛠️"),
    CategoryOption(value="app OR mobile OR desktop", label="End user applications", icon="📱"),
    CategoryOption(value="docker OR kubernetes OR cloud", label="Infrastructure and cloud", icon="☁️"),
    CategoryOption(value="video OR audio OR image", label="Media", icon="🎬"),
    CategoryOption(value="linux OR kernel OR OS", label="Operating systems", icon="💻"),
    CategoryOption(value="compiler OR parser OR language", label="Programming languages", icon="⚙️"),
    CategoryOption(value="science OR research OR medical", label="Science and medicine", icon="🔬"),
    CategoryOption(value="security OR auth OR encryption", label="Security", icon="🔒"),
    CategoryOption(value="chat OR social OR messaging", label="Social and communication", icon="💬"),
    CategoryOption(value="web OR frontend OR backend OR API", label="Web", icon="🌐"),
    CategoryOption(value="docs OR documentation OR readme", label="Documentation", icon="📝"),
]

TRENDING_PERIODS = [
    FilterOption(value="daily", label="Today"),
    FilterOption(value="weekly", label="This Week"),
    FilterOption(value="monthly", label="This Month"),
]


def get_catalog() -> FilterCatalog:
    """Bundle every option list into one response model."""
    return FilterCatalog(
        languages=LANGUAGES,
        sort_options=SORT_OPTIONS,
        popularity_options=POPULARITY_OPTIONS,
        label_options=LABEL_OPTIONS,
        categories=CATEGORIES,
        trending_periods=TRENDING_PERIODS,
        beginner_labels=BEGINNER_LABELS,
    )
