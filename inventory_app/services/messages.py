INSERT_OK = "Product saved"
INSERT_FAILED = "Error with saving product"
UPDATE_OK = "Product updated"
UPDATE_FAILED = "Error with updating product"
DELETE_OK = "Product deleted"
DELETE_FAILED = "Error with deleting product"
DELETE_UNSAVED = "Only saved products can be deleted"
LOAD_FAILED = "Could not load product"
QUANTITY_BELOW_ZERO = "Quantity can't be less than zero"
INVALID_PHONE = "Invalid phone number"
