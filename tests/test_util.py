from formhelper.util import dasherize, titleize, underscore


def test_underscore():
    assert underscore("ExtendedTitle") == "extended_title"
    assert underscore("first-name") == "first_name"
    assert underscore("HTMLParser") == "html_parser"
    assert underscore("customer_name") == "customer_name"


def test_dasherize():
    assert dasherize("delivery-customer_name") == "delivery-customer-name"
    assert dasherize("BookForm") == "book-form"
    assert dasherize("book--title__") == "book-title"
    assert dasherize("-book-") == "book"
    assert dasherize("Book Title") == "book-title"
    assert dasherize(None) == ""
    assert dasherize("Título_Libro") == "título-libro"


def test_titleize():
    assert titleize("extended_title") == "Extended Title"
    assert titleize("city") == "City"
    assert titleize("first-name") == "First Name"
    assert titleize("Title") == "Title"
