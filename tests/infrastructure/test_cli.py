"""End-to-end tests for the click CLI (simulated latency switched off)."""

from click.testing import CliRunner

from shopfront.infrastructure.cli.main import cli


def _run(*args, env=None):
    return CliRunner().invoke(cli, ["--no-latency", *args], env=env)


class TestCatalogCommands:

    def test_list_first_page(self):
        result = _run("catalog", "list")
        assert result.exit_code == 0, result.output
        assert "MacBook Pro" in result.output
        assert "Page 1 of 2 (17 products)" in result.output

    def test_list_second_page(self):
        result = _run("catalog", "list", "--page", "2")
        assert "Page 2 of 2 (17 products)" in result.output

    def test_list_category_sorted_by_price(self):
        result = _run("catalog", "list", "--category", "Home", "--sort", "price-asc")
        out = result.output
        assert out.index("Blender") < out.index("Coffee Maker") < out.index("Smart TV")
        assert "Page 1 of 1 (3 products)" in out

    def test_list_no_match(self):
        result = _run("catalog", "list", "--search", "zzz")
        assert result.exit_code == 0
        assert "No products found." in result.output

    def test_page_size_from_environment(self):
        result = _run("catalog", "list", env={"SHOPFRONT_PAGE_SIZE": "5"})
        assert "Page 1 of 4 (17 products)" in result.output

    def test_categories(self):
        result = _run("catalog", "categories")
        assert result.exit_code == 0
        lines = result.output.splitlines()
        assert [line.split()[0] for line in lines] == ["Accessories", "Electronics", "Home", "Sports"]
        assert "8 items" in lines[-1]

    def test_subcategory(self):
        result = _run("catalog", "subcategory", "--keyword", "running")
        assert result.exit_code == 0
        assert "running in Sports: 2 items" in result.output
        assert "Nike Air Max" in result.output

    def test_subcategory_sorted_by_price(self):
        default = _run("catalog", "subcategory", "--keyword", "running").output
        assert default.index("Nike Air Max") < default.index("Running Shoes Pro")

        result = _run("catalog", "subcategory", "--keyword", "running", "--sort", "price-asc")
        assert result.exit_code == 0, result.output
        assert result.output.index("Running Shoes Pro") < result.output.index("Nike Air Max")

    def test_subcategory_bad_price(self):
        result = _run("catalog", "subcategory", "--keyword", "running", "--max-price", "lots")
        assert result.exit_code == 1
        assert "Invalid money amount" in result.output


class TestCartCommands:

    def test_quote_total(self):
        result = _run("cart", "quote", "--items", "Blender:2,Backpack:1")
        assert result.exit_code == 0, result.output
        assert "Cart (3 items)" in result.output
        assert "$189.97" in result.output

    def test_quote_clamps_quantity(self):
        result = _run("cart", "quote", "--items", "Blender:0")
        assert "Cart (1 items)" in result.output
        assert "$59.99" in result.output
        assert "Quantity 0 for 'Blender' adjusted to 1." in result.output

    def test_quote_caps_large_quantity(self):
        result = _run("cart", "quote", "--items", "Blender:150")
        assert result.exit_code == 0, result.output
        assert "Cart (99 items)" in result.output

    def test_quote_blank_product_name(self):
        result = _run("cart", "quote", "--items", " :2")
        assert result.exit_code == 2
        assert "Expected 'ProductName:Quantity'" in result.output

    def test_quote_non_numeric_quantity(self):
        result = _run("cart", "quote", "--items", "Blender:two")
        assert result.exit_code == 2
        assert "must be a whole number" in result.output

    def test_quote_unknown_product(self):
        result = _run("cart", "quote", "--items", "Unicorn:1")
        assert result.exit_code == 1
        assert "Product not found: 'Unicorn'" in result.output

    def test_quote_bad_format(self):
        result = _run("cart", "quote", "--items", "Blender")
        assert result.exit_code == 2
        assert "Expected 'ProductName:Quantity'" in result.output

    def test_checkout_summary(self):
        result = _run("checkout", "--items", "Smart TV:1", "--payment", "paypal")
        assert result.exit_code == 0, result.output
        assert "Order Summary" in result.output
        assert "$799.99" in result.output
        assert "Payment method: paypal" in result.output


class TestAuthCommands:

    def test_login_accepts_any_non_empty(self):
        result = _run("login", "--email", "a@b.com", "--password", "x")
        assert result.exit_code == 0
        assert "Signed in as a@b.com" in result.output

    def test_login_empty_password(self):
        result = _run("login", "--email", "a@b.com", "--password", "")
        assert result.exit_code == 1
        assert "Email and password are required" in result.output

    def test_fixed_policy(self):
        ok = _run("--auth-policy", "fixed", "login", "--email", "test@example.com", "--password", "password")
        bad = _run("--auth-policy", "fixed", "login", "--email", "test@example.com", "--password", "guess")
        assert ok.exit_code == 0
        assert bad.exit_code == 1
        assert "Invalid credentials" in bad.output

    def test_profile_show(self):
        result = _run("profile", "show")
        assert "John Doe" in result.output
        assert "john@example.com" in result.output
