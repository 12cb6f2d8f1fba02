from rich.console import Console
from rich.panel import Panel
from rich.table import Table

console = Console()


class Display:
    @staticmethod
    def show_catalog(result: dict):
        table = Table(
            title=f"🎬 Catalog page {result['currentPage']}/{result['totalPages']} "
                  f"({result['totalItems']} items)"
        )
        table.add_column("Type", style="magenta")
        table.add_column("Title", style="bold cyan")
        table.add_column("Year", justify="right")
        table.add_column("Rating", justify="right", style="yellow")
        table.add_column("Genres", style="green")
        table.add_column("Link", style="dim", overflow="fold")

        for item in result['items']:
            rating = f"{item['rating']:.1f}" if item['rating'] is not None else "-"
            table.add_row(
                item['type'],
                item['title'],
                str(item['year']),
                rating,
                ", ".join(item['genres']),
                item['link']
            )

        console.print(table)

    @staticmethod
    def show_content(result: dict):
        info = Table(show_header=False)
        info.add_column("Field", style="cyan")
        info.add_column("Value", style="green", overflow="fold")

        info.add_row("Year", str(result['year']) if result['year'] else "-")
        info.add_row("Duration", result['duration'] or "-")
        info.add_row("Genres", ", ".join(result['genres']))
        info.add_row("Rating", str(result['rating']) if result['rating'] is not None else "-")
        info.add_row("Poster", result['poster'] or "-")

        console.print(Panel(
            result['synopsis'] or "No synopsis",
            title=f"📺 {result['title'] or 'Untitled'}",
            border_style="bold blue",
            padding=(1, 2)
        ))
        console.print(info)

        if not result['links']:
            console.print("No video links found", style="yellow")
            return

        links = Table(title="🔗 Video links")
        links.add_column("ID")
        links.add_column("Provider", style="magenta")
        links.add_column("Type")
        links.add_column("Format")
        links.add_column("URL", style="dim", overflow="fold")

        for link in result['links']:
            links.add_row(link['id'], link['provider'], link['type'], link['format'], link['url'])

        console.print(links)

    @staticmethod
    def show_extracted_links(result: dict):
        table = Table(title=f"⬇️ Extracted links ({result['extractedAt']})")
        table.add_column("Source", style="magenta")
        table.add_column("URL", style="green", overflow="fold")

        for url in result['videoUrls']:
            table.add_row("network", url)
        for url in result['downloadLinks']:
            table.add_row("anchor", url)

        if not result['videoUrls'] and not result['downloadLinks']:
            console.print("No media links found", style="yellow")
            return

        console.print(table)

    @staticmethod
    def show_error(error: str, details=None):
        message = f"[bold red]{error}[/bold red]"
        if details:
            message += f"\n{details}"
        console.print(Panel(message, title="❌ Error", border_style="red"))
