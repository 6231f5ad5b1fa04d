"""CLI entry point for Grocery Matcher."""

from pathlib import Path

import click

from . import __version__
from .config import ConfigError, configure_logging, get_recipes_file
from .curated import populate_collections
from .filters import RecipeFilter, apply_filter
from .index import RecipeIndex
from .ingredient_parser import parse_ingredient_list
from .models import DietaryTag, Difficulty, Recipe, RecipeCategory
from .ranking import RankingPipeline
from .similarity import find_similar
from .store import RecipeStoreError, load_recipes


def load_index(ctx: click.Context) -> RecipeIndex:
    """Load the recipe store named on the command line into an index."""
    path: Path = ctx.obj["recipes_path"]
    try:
        return RecipeIndex(load_recipes(path))
    except RecipeStoreError as e:
        click.echo(f"✗ {e}", err=True)
        raise SystemExit(1) from None


def get_pipeline(index: RecipeIndex) -> RankingPipeline:
    """Build the ranking pipeline from configuration."""
    try:
        return RankingPipeline.from_config(index)
    except ConfigError as e:
        click.echo(f"✗ Configuration error: {e}", err=True)
        raise SystemExit(1) from None


def format_score(score: float) -> str:
    """Format a match score as a whole percentage (only 1.0 shows as 100%)."""
    if score >= 1.0:
        return "100%"
    return f"{min(int(score * 100), 99)}%"


def display_ranked(recipe: Recipe, position: int) -> None:
    """Display one ranked recipe with its missing ingredients."""
    total = len(recipe.ingredients)
    click.echo(
        f"{position}. {recipe.name} [{format_score(recipe.match_score)}] "
        f"- {recipe.available_count} of {total} ingredients"
    )
    if recipe.missing_ingredients:
        missing = ", ".join(ing.name for ing in recipe.missing_ingredients)
        click.echo(f"   Missing: {missing}")


def display_recipe_line(recipe: Recipe) -> None:
    """Display a one-line recipe summary."""
    tags = ", ".join(sorted(tag.value for tag in recipe.dietary_tags))
    tag_info = f" ({tags})" if tags else ""
    click.echo(
        f"- {recipe.name}: {recipe.category.value}, {recipe.difficulty.value}, "
        f"{recipe.time_minutes} min{tag_info}"
    )


@click.group()
@click.version_option(version=__version__, prog_name="grocery-matcher")
@click.option(
    "--recipes",
    "-r",
    "recipes_path",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Recipe JSON file (default: $GROCERY_MATCHER_RECIPES or ~/.grocery-matcher/recipes.json)",
)
@click.option("--verbose", "-v", is_flag=True, help="Show debug logging")
@click.pass_context
def cli(ctx: click.Context, recipes_path: Path | None, verbose: bool):
    """Grocery Matcher - find recipes you can cook with what you have.

    Ranks recipes against your ingredients, shows what is missing, and finds
    similar recipes.
    """
    try:
        configure_logging("DEBUG" if verbose else None)
    except ConfigError as e:
        click.echo(f"✗ Configuration error: {e}", err=True)
        raise SystemExit(1) from None

    ctx.ensure_object(dict)
    ctx.obj["recipes_path"] = recipes_path or get_recipes_file()


# ============================================================================
# Matching Commands
# ============================================================================


@cli.command("match")
@click.argument("items", nargs=-1, required=True)
@click.option("--limit", "-l", default=10, help="Maximum recipes to show")
@click.pass_context
def match_cmd(ctx: click.Context, items: tuple[str, ...], limit: int):
    """Rank recipes by how much of each is on your shopping list."""
    index = load_index(ctx)
    pipeline = get_pipeline(index)

    ranked = pipeline.refresh(list(items))
    if not ranked:
        click.echo("No recipes found.")
        return

    click.echo(f"Recipes for {len(items)} item(s):")
    for position, recipe in enumerate(ranked[:limit], 1):
        display_ranked(recipe, position)


@cli.command("suggest")
@click.argument("text")
@click.option("--limit", "-l", type=int, help="Maximum suggestions")
@click.pass_context
def suggest_cmd(ctx: click.Context, text: str, limit: int | None):
    """Suggest recipes for a free-text ingredient list.

    Example: grocery-matcher suggest "2 cups flour, eggs and milk"
    """
    ingredients = parse_ingredient_list(text)
    if not ingredients:
        click.echo("✗ No ingredients found in input", err=True)
        raise SystemExit(1)

    index = load_index(ctx)
    pipeline = get_pipeline(index)
    suggestions = pipeline.suggest(ingredients, limit=limit)

    click.echo(f"Ingredients: {', '.join(ing.name for ing in ingredients)}")
    if not suggestions:
        click.echo("No matching recipes.")
        return

    position = 1
    for tier, recipes in pipeline.tiers(suggestions).items():
        if not recipes:
            continue
        click.echo()
        click.echo(f"{tier.value} ({len(recipes)})")
        click.echo("-" * 40)
        for recipe in recipes:
            display_ranked(recipe, position)
            position += 1


# ============================================================================
# Browsing Commands
# ============================================================================


@cli.command("similar")
@click.argument("recipe")
@click.option("--limit", "-l", default=5, help="Maximum similar recipes to show")
@click.pass_context
def similar_cmd(ctx: click.Context, recipe: str, limit: int):
    """Show recipes similar to RECIPE (name or id)."""
    index = load_index(ctx)

    anchor = index.by_id(recipe)
    if anchor is None:
        wanted = recipe.strip().lower()
        anchor = next((r for r in index if r.name.lower() == wanted), None)
    if anchor is None:
        click.echo(f"✗ Recipe '{recipe}' not found", err=True)
        raise SystemExit(1)

    similar = find_similar(anchor, index.recipes, limit)
    if not similar:
        click.echo(f"No recipes similar to {anchor.name}.")
        return

    click.echo(f"Similar to {anchor.name}:")
    for other in similar:
        display_recipe_line(other)


@cli.command("search")
@click.argument("query", required=False, default="")
@click.option(
    "--category", "-c", type=click.Choice([c.value for c in RecipeCategory]), help="Category"
)
@click.option("--diet", "-d", type=click.Choice([t.value for t in DietaryTag]), help="Dietary tag")
@click.option("--max-time", "-t", type=int, help="Maximum total time in minutes")
@click.option(
    "--difficulty", "-D", type=click.Choice([d.value for d in Difficulty]), help="Difficulty"
)
@click.pass_context
def search_cmd(
    ctx: click.Context,
    query: str,
    category: str | None,
    diet: str | None,
    max_time: int | None,
    difficulty: str | None,
):
    """Search and filter recipes."""
    index = load_index(ctx)
    recipe_filter = RecipeFilter(
        category=RecipeCategory(category) if category else None,
        dietary_tag=DietaryTag(diet) if diet else None,
        max_time=max_time,
        difficulty=Difficulty(difficulty) if difficulty else None,
        query=query or None,
    )

    results = apply_filter(index.recipes, recipe_filter)
    if not results:
        click.echo("No recipes found.")
        return

    click.echo(f"Found {len(results)} recipe(s):")
    for recipe in results:
        display_recipe_line(recipe)


@cli.command("collections")
@click.option("--show-empty", is_flag=True, help="Include collections with no recipes")
@click.pass_context
def collections_cmd(ctx: click.Context, show_empty: bool):
    """List curated recipe collections."""
    index = load_index(ctx)

    for populated in populate_collections(index.recipes):
        if not populated.recipes and not show_empty:
            continue
        collection = populated.collection
        click.echo(f"{collection.emoji} {collection.name} ({len(populated.recipes)})")
        for recipe in populated.recipes:
            click.echo(f"   - {recipe.name}")


# ============================================================================
# Entry Point
# ============================================================================


def main():
    """Main entry point."""
    cli()


if __name__ == "__main__":
    main()
