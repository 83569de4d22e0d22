from notion_html.api.client import NotionClient
from notion_html.export import save_html
from notion_html.render import render_blocks
from dotenv import load_dotenv
from pathlib import Path
import json
import logging


def list_pages(client: NotionClient):
    """Print all pages and databases shared with the integration."""
    print("\nShared Pages:")
    pages = client.list_shared_pages()
    for page in pages:
        print(f"- {page.title} ({page.type})")
        print(f"  URL: {page.url}")
        print(f"  ID: {page.id}\n")

    databases = client.list_shared_databases()
    if databases:
        print("\nShared Databases:")
        for database in databases:
            print(f"- {database.title} ({database.id})")
    return pages


def export_page(client: NotionClient, page_id: str):
    """Fetch a page and write it out as an HTML document."""
    page_content = client.get_page_content(page_id)
    if not page_content:
        print("Could not retrieve page content")
        return None

    filename = save_html(page_content)
    print(f"\nExported '{page_content.title}' to {filename}")
    return filename


def render_json_file(path: str):
    """Render a JSON file holding a list of blocks and print the HTML."""
    try:
        data = json.loads(Path(path).read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as e:
        print(f"\nCould not read {path}: {e}")
        return None

    # accept either a bare block list or a blocks.children.list response
    blocks = data.get("results", data) if isinstance(data, dict) else data
    html = render_blocks(blocks)
    print("\n" + html)
    return html


def main():
    load_dotenv()
    logging.basicConfig(
        level=logging.INFO, format="%(levelname)s %(name)s: %(message)s"
    )

    try:
        while True:
            print("\nnotion to html\n---")
            print("1. list shared pages")
            print("2. export a page to html")
            print("3. render a json file of blocks")
            print("4. bye!")

            choice = input("\nenter your choice (1-4): ")

            if choice == "1":
                list_pages(NotionClient())
            elif choice == "2":
                page_id = input("\nenter the page id: ").strip()
                if page_id:
                    export_page(NotionClient(), page_id)
                else:
                    print("\nNo page ID provided.")
            elif choice == "3":
                path = input("\nenter the path to the json file: ").strip()
                render_json_file(path)
            elif choice == "4":
                print("\ngoodbye!")
                break
            else:
                print("\ninvalid choice. please try again.")

    except ValueError as e:
        print(f"Error: {e}")


if __name__ == "__main__":
    main()
