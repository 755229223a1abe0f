"""AdmitAnimal command handler.

Admits an animal into the zoo if the water allowance allows it.
"""

from zoo_keeper.application.commands.zoo_commands import AdmitAnimal
from zoo_keeper.core.result import Failure, Result
from zoo_keeper.domain.entities.zoo import Zoo
from zoo_keeper.domain.errors import ZooError
from zoo_keeper.domain.protocols.animal_protocol import AnimalProtocol
from zoo_keeper.domain.protocols.logger_protocol import LoggerProtocol


class AdmitAnimalHandler:
    """Handler for AdmitAnimal command.

    Dependencies (injected via constructor):
        - Zoo: Aggregate admitting the animal
        - LoggerProtocol: For structured logging
    """

    def __init__(self, zoo: Zoo, logger: LoggerProtocol) -> None:
        self._zoo = zoo
        self._logger = logger

    def handle(self, cmd: AdmitAnimal) -> Result[AnimalProtocol, ZooError]:
        """Handle AdmitAnimal command.

        Args:
            cmd: AdmitAnimal command with the animal.

        Returns:
            Success(animal): Animal admitted.
            Failure(ZooError): NOT_ENOUGH_WATER.
        """
        result = self._zoo.add_animal(cmd.animal)

        if isinstance(result, Failure):
            self._logger.warning(
                "animal_not_admitted",
                animal_name=cmd.animal.name,
                water_consumption=str(cmd.animal.water_consumption),
                water_limit=str(self._zoo.water_limit),
                error_code=result.error.code.value,
            )
            return result

        self._logger.info(
            "animal_admitted",
            animal_name=cmd.animal.name,
            animal_type=type(cmd.animal).__name__,
            water_limit=str(self._zoo.water_limit),
        )
        return result
